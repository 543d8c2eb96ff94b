"""
Player state and money transfers.
"""

BANKRUPT_STATUS = "*** bankrupt ***"
WAITING_STATUS = "*** waiting: {rounds} ***"
ACTIVE_STATUS = "in game"


class PlayerState:
    """Represents the complete state of a player in the game."""

    def __init__(self, player_id: int, name: str, starting_cash: int):
        self.player_id = player_id
        self._name = name
        self.cash = starting_cash
        self.position = 0
        self.suspension = 0
        self.is_bankrupt = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_waiting(self) -> bool:
        """Whether the player still has rounds to sit out."""
        return self.suspension > 0

    @property
    def status(self) -> str:
        """Status text reported to the score board."""
        if self.is_bankrupt:
            return BANKRUPT_STATUS
        if self.is_waiting:
            return WAITING_STATUS.format(rounds=self.suspension)
        return ACTIVE_STATUS

    def pay(self, amount: int) -> int:
        """
        Pay `amount`, or everything the player has if that is not enough.

        A player who cannot cover the full amount goes bankrupt.

        Returns:
            The amount actually paid
        """
        if self.cash >= amount:
            self.cash -= amount
            return amount

        paid = self.cash
        self.cash = 0
        self.is_bankrupt = True
        return paid

    def take(self, amount: int) -> bool:
        """
        Credit the player with `amount`.

        Returns False (and changes nothing) for a bankrupt player.
        """
        if self.is_bankrupt:
            return False
        self.cash += amount
        return True

    def wait_if_needed(self) -> None:
        """Count one round off the suspension."""
        if self.suspension > 0:
            self.suspension -= 1

    def suspend(self, rounds: int) -> None:
        """Set the suspension to exactly `rounds`."""
        self.suspension = rounds

    def move(self, position: int) -> None:
        self.position = position

    def __repr__(self) -> str:
        return (
            f"PlayerState(id={self.player_id}, name='{self.name}', "
            f"cash={self.cash}, position={self.position}, "
            f"suspension={self.suspension}, bankrupt={self.is_bankrupt})"
        )

