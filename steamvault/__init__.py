"""SteamVault dashboard — Steam playtime analytics sections over the analytics api."""

__version__ = "0.1.0"
