"""Path search algorithms over ``PathGraph``."""
