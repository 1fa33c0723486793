from .finder import WordFinder, letters_to_vec

__all__ = ["WordFinder", "letters_to_vec"]
