"""Reusable phrases and defaults."""
# Version 2.9.9 of Sleipnir, an obscure Japanese web browser.
DEFAULT_USER_AGENT = (
    "Mozilla/4.0 (compatible; MSIE 8.0; Windows NT 6.0; Trident/4.0; SLCC1; "
    ".NET CLR 2.0.50727; Media Center PC 5.0; .NET CLR 3.5.30729; "
    ".NET CLR 3.0.30618; .NET4.0C; .NET4.0E; Sleipnir/2.9.9)"
)

ERROR_INVALID_URL = "Invalid URL."
ERROR_INVALID_METHOD = "Method should be one of: post, get"
ERROR_INVALID_USER_AGENT = "Invalid user agent string."
ERROR_TRANSFER = "Transfer to {url} failed: {reason}"
