"""Gift wrap option for the checkout.

Stores the shopper's gift wrap choice in the session, adds a non-taxable
fee to the cart while it is selected and snapshots the choice onto the
order when checkout creates it.
"""
