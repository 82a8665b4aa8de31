# Argkit Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Color constants used by argkit output, usable directly inside rich markup."""


class OneColors:
    """One Dark palette."""

    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    RED = "#E06C75"
    GREEN = "#98C379"
    DARK_YELLOW = "#D19A66"
    YELLOW = "#E5C07B"
    BLUE = "#61AFEF"
    CYAN = "#56B6C2"
    MAGENTA = "#C678DD"
