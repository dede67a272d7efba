"""Game states and the table of allowed transitions between them."""

from __future__ import annotations

from enum import Enum

from statemachine import State, StateMachine


class GameState(Enum):
    LOADING = "loading"
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameStateMachine(StateMachine):
    """Guards the session lifecycle.

    The machine only decides whether an event is legal and where it leads;
    the Session does the actual work (resetting the board, saving the high
    score). Sending an event that is not legal from the current state raises
    ``statemachine.exceptions.TransitionNotAllowed``.
    """

    loading = State("Loading", value=GameState.LOADING, initial=True)
    menu = State("Menu", value=GameState.MENU)
    playing = State("Playing", value=GameState.PLAYING)
    paused = State("Paused", value=GameState.PAUSED)
    game_over = State("Game over", value=GameState.GAME_OVER)

    assets_ready = loading.to(menu)

    start_session = (
        menu.to(playing)
        | playing.to.itself()
        | paused.to(playing)
        | game_over.to(playing)
    )
    restart_session = playing.to.itself() | paused.to(playing) | game_over.to(playing)

    pause = playing.to(paused)
    visibility_lost = playing.to(paused)
    resume = paused.to(playing)

    end_session = playing.to(game_over)

    @property
    def game_state(self) -> GameState:
        return self.current_state.value
