"""
GameBase - abstract base class for all turn-based games.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Union

from autoplay.core.types import Action, GameOver, PlayerID
from autoplay.games.game_state import Ctx


class GameBase(ABC):
    """
    Abstract description of a turn-based game.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - Games describe RULES, not transitions.
    - Transitions are produced by the reducer (see games.reducer), which
      copies G, calls apply_move(), then end_if() and next_players().
    - Bots never call apply_move() directly.
    """

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'tic_tac_toe')."""
        pass

    @abstractmethod
    def num_players(self) -> int:
        """Return the default number of players."""
        pass

    @abstractmethod
    def setup(self, num_players: int) -> Any:
        """Return the initial game data G."""
        pass

    @abstractmethod
    def valid_moves(self, G: Any, ctx: Ctx, player_id: PlayerID) -> Union[Sequence[Action], int]:
        """
        Return the ordered legal actions for player_id.

        This is the default move enumerator for bots. Must return an empty
        list for a player who cannot act.
        """
        pass

    @abstractmethod
    def apply_move(self, G: Any, ctx: Ctx, action: Action) -> None:
        """
        Apply an action to G in place.

        The reducer hands over a private copy of G, so mutation is safe.
        Raise ValueError for illegal actions.
        """
        pass

    @abstractmethod
    def end_if(self, G: Any, ctx: Ctx) -> Optional[GameOver]:
        """Return the result if the game has ended, else None."""
        pass

    @abstractmethod
    def state_string(self, G: Any) -> str:
        """Pretty string representation of G."""
        pass

    def player_order(self, num_players: int) -> List[PlayerID]:
        """Seating order. Players are numbered 1..n."""
        return list(range(1, num_players + 1))

    def next_players(self, G: Any, ctx: Ctx) -> List[PlayerID]:
        """Players eligible to act after ctx.current_player has moved."""
        order = self.player_order(ctx.num_players)
        idx = order.index(ctx.current_player)
        return [order[(idx + 1) % len(order)]]
