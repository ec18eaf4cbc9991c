from .normalize import normalize_series, series_bounds

__all__ = ["normalize_series", "series_bounds"]
