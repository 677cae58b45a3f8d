from garden.shop import select_seed_from_menu, shop_items


def test_select_seed_from_menu():
    """Valid indexes select a seed; out of range ones do not."""
    selection = select_seed_from_menu(4)
    assert selection.seed == "mushroom"
    assert selection.message == "Selected Mushroom Spores (3g). Place it in your garden!"

    assert select_seed_from_menu(len(shop_items())).seed is None
    assert select_seed_from_menu(-1).message == "Invalid shop item."
