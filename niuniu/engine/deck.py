"""
Deck creation and dealing for hand simulation.

The deck is a numpy int8 array of length 52.
    1 = card is available in the deck
    0 = card has been dealt

Integer encoding: card // 4 = rank index, card % 4 = suit index.
"""

from __future__ import annotations

import numpy as np

from .cards import card_label


def create_deck() -> np.ndarray:
    """Create a fresh, full 52-card deck.

    Examples:
        >>> create_deck().sum()
        52
    """
    return np.ones(52, dtype=np.int8)


def available_cards(deck: np.ndarray) -> np.ndarray:
    """Return the indices of cards still available in the deck."""
    return np.where(deck == 1)[0]


def cards_remaining(deck: np.ndarray) -> int:
    """Return the count of cards still available in the deck."""
    return int(deck.sum())


def deal_card(deck: np.ndarray) -> int:
    """Draw one random available card from the deck and mark it as dealt.

    Args:
        deck: Mutable deck array — modified in place.

    Raises:
        ValueError: If the deck is empty.
    """
    avail = available_cards(deck)
    if len(avail) == 0:
        raise ValueError("Cannot deal from an empty deck.")
    card = int(np.random.choice(avail))
    deck[card] = 0
    return card


def deal_hand(deck: np.ndarray, n_cards: int = 5) -> tuple[int, ...]:
    """Deal *n_cards* random cards from the deck.

    Raises:
        ValueError: If fewer than *n_cards* cards remain.

    Examples:
        >>> deck = create_deck()
        >>> len(deal_hand(deck))
        5
        >>> cards_remaining(deck)
        47
    """
    if cards_remaining(deck) < n_cards:
        raise ValueError(
            f"Cannot deal {n_cards} cards: only {cards_remaining(deck)} remain."
        )
    return tuple(deal_card(deck) for _ in range(n_cards))


def hand_labels(cards: tuple[int, ...]) -> tuple[str, ...]:
    """Strip suits from dealt cards, leaving the rank labels the scorer takes.

    Examples:
        >>> hand_labels((32, 36, 51))
        ('10', 'J', 'A')
    """
    return tuple(card_label(c) for c in cards)
