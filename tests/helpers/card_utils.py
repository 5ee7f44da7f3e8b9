"""Card creation utilities for testing."""

from poker.cards import Card

# Accept suit symbols as well as letters: "A♠" == "As"
SUIT_SYMBOLS = {"♣": "c", "♦": "d", "♥": "h", "♠": "s"}


def make_card(s: str) -> Card:
    """Create a card from a string like 'As', '10h' or 'Q♦'."""
    s = s.strip()
    suit = SUIT_SYMBOLS.get(s[-1], s[-1])
    return Card.from_string(s[:-1] + suit)


def make_cards_from_strings(card_strings: list[str]) -> list[Card]:
    """Create cards from strings like ['As', 'Kh', 'Qc'].

    Args:
        card_strings: List of card strings (e.g., ['As', '10h', 'J♠'])

    Returns:
        List of Card objects in the given order
    """
    return [make_card(s) for s in card_strings]
