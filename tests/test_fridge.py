from woof_agent.fridge import (
    FRIDGE_TOOLS,
    add_to_shopping_list,
    get_fridge_inventory,
    set_timer,
    suggest_recipes,
)


def test_all_tools_are_documented() -> None:
    assert len(FRIDGE_TOOLS) == 7
    for tool in FRIDGE_TOOLS:
        assert tool.__doc__


def test_inventory_flags_low_stock() -> None:
    assert "Low stock: Milk, Eggs" in get_fridge_inventory()


def test_recipes_with_and_without_preference() -> None:
    plain = suggest_recipes()
    assert plain.startswith("Based on your fridge inventory")
    filtered = suggest_recipes("vegetarian")
    assert filtered.startswith("Filtering for: vegetarian\n\n")
    assert filtered.endswith(plain)


def test_timer_echoes_arguments() -> None:
    text = set_timer("pasta", 12)
    assert "Name: pasta" in text
    assert "Duration: 12 minutes" in text


def test_shopping_list_quantity_is_optional() -> None:
    assert "• Butter ← New" in add_to_shopping_list("Butter")
    assert "• Flour (500g) ← New" in add_to_shopping_list("Flour", "500g")
