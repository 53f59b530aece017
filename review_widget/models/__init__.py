from review_widget.models.review import ReviewRecord

__all__ = [
    "ReviewRecord",
]
