"""
Image Proxy

Rewrites file-share hosted product images into resized thumbnails served
by an image proxy. Supports both share link shapes:
- https://drive.google.com/open?id=<ID>
- https://drive.google.com/file/d/<ID>/view
"""

import re
from typing import Any, Dict, Optional
from urllib.parse import quote

SHOES_CATEGORY = "Shoes"

_ID_PARAM = re.compile(r'id=([^&/]+)')
_ID_PATH = re.compile(r'/d/([^&/]+)')


def extract_file_id(url: str) -> Optional[str]:
    """
    Extract the file identifier from a file-share URL.

    Args:
        url: Share URL in either supported shape

    Returns:
        File identifier, or None if the URL carries none

    Example:
        >>> extract_file_id("https://drive.google.com/file/d/1AbC/view")
        '1AbC'
    """
    if not url:
        return None
    match = _ID_PARAM.search(url) or _ID_PATH.search(url)
    return match.group(1) if match else None


class ImageProxy:
    """
    Builds proxied thumbnail URLs for file-share images.

    Shoes are scaled by width only; everything else gets a square,
    top-anchored center crop so apparel grids line up.

    Usage:
        proxy = ImageProxy()
        proxy.rewrite("https://drive.google.com/open?id=abc", "Shoes")
        # Returns: "https://wsrv.nl/?url=https%3A%2F%2Fdrive.google.com%2Fuc%3Fid%3Dabc&w=800"
    """

    def __init__(
        self,
        host: str = "wsrv.nl",
        file_host: str = "drive.google.com",
        width: int = 800,
        height: int = 800,
    ):
        self.host = host
        self.file_host = file_host
        self.width = width
        self.height = height

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "ImageProxy":
        """Build from the image_proxy section of config/sources.yaml."""
        return cls(**{k: v for k, v in settings.items() if k in ('host', 'file_host', 'width', 'height')})

    def is_file_share_url(self, url: Optional[str]) -> bool:
        """Check whether an image is hosted on the file-share service."""
        return bool(url) and self.file_host in url

    def build_proxy_url(self, file_id: str, category: Optional[str]) -> str:
        """
        Build the proxied thumbnail URL for a file identifier.

        Args:
            file_id: File-share identifier
            category: Resolved product category (controls the resize mode)

        Returns:
            Proxy URL with resize parameters
        """
        source_url = f"https://{self.file_host}/uc?id={file_id}"
        proxied = f"https://{self.host}/?url={quote(source_url, safe='')}&w={self.width}"
        if category == SHOES_CATEGORY:
            return proxied
        return f"{proxied}&h={self.height}&fit=cover&a=top"

    def rewrite(self, url: str, category: Optional[str]) -> str:
        """
        Rewrite a file-share image URL through the proxy.

        Args:
            url: Resolved image URL
            category: Resolved product category

        Returns:
            Proxied URL, or the original URL when it is not a file-share
            link or no identifier can be extracted
        """
        if not self.is_file_share_url(url):
            return url

        file_id = extract_file_id(url)
        if not file_id:
            return url

        return self.build_proxy_url(file_id, category)
