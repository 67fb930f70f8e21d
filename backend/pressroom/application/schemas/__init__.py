from .article import ArticleForm, ArticleView

__all__ = [
    "ArticleForm",
    "ArticleView",
]
