from .size import MAX_FRACTION_PART, parse_bias, parse_size

__all__ = ["MAX_FRACTION_PART", "parse_bias", "parse_size"]
