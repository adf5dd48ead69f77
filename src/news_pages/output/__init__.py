from news_pages.output.persister import persist
from news_pages.output.projector import SEPARATOR, project, render

__all__ = [
    "SEPARATOR",
    "persist",
    "project",
    "render",
]
