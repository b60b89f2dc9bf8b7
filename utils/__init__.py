from .text import clean_text
from .ids import generate_id

__all__ = ['clean_text', 'generate_id']
