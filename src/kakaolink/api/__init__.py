"""HTTP surface: chat export upload, link export, and share text."""

from kakaolink.api.router import router

__all__ = ["router"]
