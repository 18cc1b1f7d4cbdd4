"""Canadian Fire Weather Index (FWI) System indices used by the FBP engine."""

from fbpspread.fwi.indices import calculate_bui, calculate_isi

__all__ = ["calculate_bui", "calculate_isi"]
