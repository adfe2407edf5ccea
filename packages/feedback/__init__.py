from .wordlist import FeedbackList, FeedbackLists

__all__ = ["FeedbackList", "FeedbackLists"]
