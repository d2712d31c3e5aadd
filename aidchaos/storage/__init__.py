"""File-based JSON storage for the HTTP host.

Data layout:
  data/
    sessions/
      <slug>/
        cards.json    Story cards (settings card, Class/Race sheets, ...)
        state.json    Shared state mapping between passes
        history.json  Action history, oldest first
        memory.txt    Free-text memory blob scanned for "Class: X" lines

The pipeline itself never touches these files; it receives a RecordStore,
a HistoryReader, a state mapping and a memory string. This package is how the
bundled HTTP host provides them.

Slug rules: title → Unicode normalize → strip non-ASCII → lowercase →
replace non-alnum runs with hyphen → strip leading/trailing hyphens.
"""

from .core import (  # noqa: F401
    data_dir,
    init_storage,
    sessions_dir,
    slugify,
)

from .cards import (  # noqa: F401
    CardStore,
    JsonCardStore,
    RecordStore,
)

from .sessions import (  # noqa: F401
    create_session,
    get_cards,
    get_history,
    get_memory,
    get_state,
    list_sessions,
    save_history,
    save_memory,
    save_state,
    session_dir,
    session_exists,
)
