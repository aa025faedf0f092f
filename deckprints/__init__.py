"""
deckprints: find every printing of the cards in a deck list.

Resolves deck list lines against Scryfall, expands each card into its
printings, and ranks the sets those printings come from.
"""
