from .join import join_thresholds

__all__ = ['join_thresholds']
