# fridge.py
# Mock smart-fridge plugin for the Family Hub demo.
# Every tool returns fixed data; only the timer and shopping-list tools echo their arguments.

from typing import Annotated, Optional


# ----------------- Tools -----------------
def get_calendar_events() -> Annotated[str, "Family events for today and tomorrow."]:
    """Gets upcoming calendar events for the family. Returns events for today and tomorrow."""
    return (
        "📅 Today's Events:\n"
        "- 8:00 AM: Kids school drop-off\n"
        "- 10:00 AM: Team standup (Dad - remote)\n"
        "- 3:30 PM: Soccer practice pickup\n"
        "- 6:00 PM: Family dinner\n"
        "\n"
        "📅 Tomorrow's Events:\n"
        "- 9:00 AM: Dentist appointment (Mom)\n"
        "- 12:00 PM: Lunch with Grandma\n"
        "- 4:00 PM: Piano lesson (Emma)"
    )


def get_fridge_inventory() -> Annotated[str, "Fridge contents with quantities and expiry."]:
    """Gets the current inventory of items in the smart fridge, including quantities and expiration status."""
    return (
        "🥬 Fresh Produce:\n"
        "- Milk (1 gallon) - expires in 3 days\n"
        "- Eggs (8 remaining) - expires in 5 days\n"
        "- Spinach - expires tomorrow ⚠️\n"
        "- Carrots (1 bag) - fresh\n"
        "- Apples (4) - fresh\n"
        "\n"
        "🥩 Proteins:\n"
        "- Chicken breast (2 lbs) - frozen\n"
        "- Ground beef (1 lb) - expires in 2 days\n"
        "- Salmon fillet - expires tomorrow ⚠️\n"
        "\n"
        "🧀 Dairy:\n"
        "- Cheddar cheese - fresh\n"
        "- Yogurt (3 cups) - expires in 4 days\n"
        "- Butter - fresh\n"
        "\n"
        "🥤 Beverages:\n"
        "- Orange juice (half full)\n"
        "- Sparkling water (6 cans)\n"
        "\n"
        "⚠️ Low stock: Milk, Eggs"
    )


RECIPES = (
    "Based on your fridge inventory, here are some recipe suggestions:\n"
    "\n"
    "🍳 Quick & Easy (under 30 min):\n"
    "1. Spinach & Cheese Omelette - Use the spinach before it expires!\n"
    "   Ingredients: eggs, spinach, cheddar cheese, butter\n"
    "\n"
    "2. Chicken Stir-fry with Carrots\n"
    "   Ingredients: chicken breast, carrots, soy sauce (pantry)\n"
    "\n"
    "🍽️ Family Dinners:\n"
    "3. Baked Salmon with Roasted Vegetables - Use salmon today!\n"
    "   Ingredients: salmon fillet, carrots, olive oil (pantry)\n"
    "\n"
    "4. Beef Tacos\n"
    "   Ingredients: ground beef, cheddar cheese, tortillas (pantry)\n"
    "\n"
    "💡 Tip: The spinach and salmon expire tomorrow - consider using them today!"
)


def suggest_recipes(
    preference: Annotated[Optional[str], "Optional dietary preference like 'vegetarian', 'low-carb', 'quick meals'"] = None,
) -> Annotated[str, "Recipe ideas from what's in the fridge."]:
    """Suggests recipes based on available fridge inventory and optionally dietary preferences."""
    if preference:
        return f"Filtering for: {preference}\n\n{RECIPES}"
    return RECIPES


def get_weather() -> Annotated[str, "Current conditions and forecast."]:
    """Gets the current weather and forecast for the local area."""
    return (
        "🌤️ Current Weather: Seoul, South Korea\n"
        "Temperature: 12°C (54°F)\n"
        "Condition: Partly Cloudy\n"
        "Humidity: 65%\n"
        "\n"
        "📅 Today's Forecast:\n"
        "- Morning: 10°C, Cloudy\n"
        "- Afternoon: 15°C, Partly Sunny\n"
        "- Evening: 11°C, Clear\n"
        "\n"
        "📅 Tomorrow:\n"
        "- High: 17°C | Low: 8°C\n"
        "- Condition: Sunny\n"
        "\n"
        "👕 Recommendation: Light jacket for morning, comfortable by afternoon."
    )


def set_timer(
    timer_name: Annotated[str, "Name or label for the timer (e.g., 'pasta', 'oven', 'eggs')"],
    minutes: Annotated[int, "Duration in minutes"],
) -> Annotated[str, "Timer confirmation."]:
    """Sets a kitchen timer with a name and duration."""
    return (
        "⏱️ Timer Set!\n"
        f"Name: {timer_name}\n"
        f"Duration: {minutes} minutes\n"
        "\n"
        "I'll alert you when the timer is done.\n"
        'Say "check timers" to see active timers.'
    )


def add_to_shopping_list(
    item: Annotated[str, "Item to add to the shopping list"],
    quantity: Annotated[Optional[str], "Quantity or amount (e.g., '2', '1 gallon', '500g')"] = None,
) -> Annotated[str, "The updated shopping list."]:
    """Adds an item to the family shopping list with optional quantity."""
    entry = f"{item} ({quantity})" if quantity else item
    return (
        "✅ Added to Shopping List:\n"
        f"• {entry}\n"
        "\n"
        "📝 Current Shopping List:\n"
        "• Milk (1 gallon)\n"
        "• Bread\n"
        "• Eggs (1 dozen)\n"
        f"• {entry} ← New\n"
        "\n"
        '💡 Tip: Say "show shopping list" to see all items.'
    )


def get_fridge_status() -> Annotated[str, "Temperatures, door state and alerts."]:
    """Gets the overall status of the smart fridge including temperature and alerts."""
    return (
        "🧊 Smart Fridge Status\n"
        "\n"
        "Temperature:\n"
        "- Fridge: 3°C (optimal: 1-4°C) ✅\n"
        "- Freezer: -18°C (optimal: -18°C) ✅\n"
        "\n"
        "Door Status: Closed ✅\n"
        "\n"
        "⚠️ Alerts:\n"
        "- 2 items expiring soon (spinach, salmon)\n"
        "- Milk running low (reorder suggested)\n"
        "\n"
        "Energy Mode: Eco Mode Active\n"
        "Last Filter Change: 45 days ago (change in 45 days)"
    )


FRIDGE_TOOLS = [
    get_calendar_events,
    get_fridge_inventory,
    suggest_recipes,
    get_weather,
    set_timer,
    add_to_shopping_list,
    get_fridge_status,
]
