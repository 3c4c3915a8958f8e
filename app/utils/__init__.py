from .headers import no_cache_headers

__all__ = [
    "no_cache_headers",
]
