from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_SLOT_CLICK = "slot_click"                    # payload: index=int


# ============================================================================
# PLACEMENT
# ============================================================================
EVENT_NUMBER_GENERATED = "number_generated"        # payload: value=int
EVENT_NUMBER_PLACED = "number_placed"              # payload: index=int, value=int, placements=int
EVENT_PLACEMENT_REJECTED = "placement_rejected"    # payload: index=int, value=int|None, reason=str


# ============================================================================
# SESSION & STATS
# ============================================================================
EVENT_SESSION_STARTED = "session_started"          # payload: size=int
EVENT_SESSION_WON = "session_won"                  # payload: placements=int
EVENT_SESSION_LOST = "session_lost"                # payload: value=int, placements=int
EVENT_STATS_CHANGED = "stats_changed"              # payload: games_played=int, games_won=int, total_placements=int
EVENT_STATS_SUMMARY = "stats_summary"              # payload: summary=str


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"          # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_MENU_NEW_GAME_SELECTED = "menu_new_game_selected"    # payload: None
EVENT_NEW_GAME_REQUEST = "new_game_request"            # payload: None
EVENT_QUIT_REQUEST = "quit_request"                    # payload: None
