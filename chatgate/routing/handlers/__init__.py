"""Fast-path command handlers.

``default_handlers()`` returns them most-specific first; the router relies on
that order to break confidence ties.
"""

from .base import CommandHandler
from .news_tab import NewsTabSwitchHandler
from .navigation import NavigationHandler
from .news_search import NewsSearchHandler
from .task_create import TaskCreateHandler
from .tasks_filter import TasksFilterHandler
from .news_sources import NewsSourcesOpenHandler
from .workspace_switch import WorkspaceSwitchHandler


def default_handlers() -> list[CommandHandler]:
    """Build the handler list in registration (tie-break) order."""
    return [
        TaskCreateHandler(),
        WorkspaceSwitchHandler(),
        NewsTabSwitchHandler(),
        NewsSourcesOpenHandler(),
        NewsSearchHandler(),
        TasksFilterHandler(),
        NavigationHandler(),
    ]


__all__ = [
    "CommandHandler",
    "NavigationHandler",
    "NewsSearchHandler",
    "NewsSourcesOpenHandler",
    "NewsTabSwitchHandler",
    "TaskCreateHandler",
    "TasksFilterHandler",
    "WorkspaceSwitchHandler",
    "default_handlers",
]
