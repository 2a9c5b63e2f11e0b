"""Catalog constants.

``SAMPLE_CATALOG`` is inserted by ``POST /api/initialize`` and the
``seed_data`` management command on an empty catalog.
"""

from decimal import Decimal

SAMPLE_CATALOG = [
    {
        "name": "Charizard VMAX",
        "price": Decimal("299.99"),
        "stock": 5,
        "description": "Rainbow Rare Charizard VMAX from Champion's Path",
        "image": "https://images.pokemontcg.io/swsh35/74_hires.png",
        "market_price": Decimal("349.99"),
        "market_url": "https://www.tcgplayer.com/product/223194",
        "market_source": "TCGPlayer",
    },
    {
        "name": "Pikachu VMAX",
        "price": Decimal("89.99"),
        "stock": 12,
        "description": "Vivid Voltage Rainbow Rare Pikachu VMAX",
        "image": "https://images.pokemontcg.io/swsh4/188_hires.png",
        "market_price": Decimal("95.99"),
        "market_url": "https://www.tcgplayer.com/product/226524",
        "market_source": "TCGPlayer",
    },
    {
        "name": "Mewtwo & Mew GX",
        "price": Decimal("45.99"),
        "stock": 8,
        "description": "Unified Minds Secret Rare",
        "image": "https://images.pokemontcg.io/sm11/222_hires.png",
        "market_price": Decimal("52.99"),
        "market_url": "https://www.tcgplayer.com/product/192290",
        "market_source": "TCGPlayer",
    },
]
