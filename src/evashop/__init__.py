"""EVA shop: a Django storefront carrying the gift wrap checkout option."""
