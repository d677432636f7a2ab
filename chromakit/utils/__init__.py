from .num_utils import clip_unit, wrap_unit, circular_distance, value_or_default, get_dimension

__all__ = ['clip_unit', 'wrap_unit', 'circular_distance', 'value_or_default', 'get_dimension']
