"""In-memory, append-only conversation store."""

from deepseek_chat.models.schemas import ConversationTurn, Role


class ConversationStore:
    """Ordered list of turns driving the transcript and the prompt history.

    Turns are never edited or removed. Start a new store for a new chat.
    """

    def __init__(self) -> None:
        self._turns: list[ConversationTurn] = []

    def append(self, turn: ConversationTurn) -> None:
        self._turns.append(turn)

    def add(self, role: Role, text: str) -> ConversationTurn:
        """Create a turn for ``role`` and append it."""
        turn = ConversationTurn(role=role, text=text)
        self.append(turn)
        return turn

    def snapshot(self) -> tuple[ConversationTurn, ...]:
        return tuple(self._turns)

    def __len__(self) -> int:
        return len(self._turns)
