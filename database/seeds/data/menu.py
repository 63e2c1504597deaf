"""
Yummy Catalog Seed Data - Default menu.

The bundled dataset used when SEED_DATA_FILE is not set.
"""

from database.seeds.data.common import (
    CatalogData,
    CategoryData,
    CustomizationData,
    MenuItemData,
)

# =============================================================================
# Categories
# =============================================================================

CATEGORIES: list[CategoryData] = [
    {"name": "Burgers", "description": "Juicy grilled burgers"},
    {"name": "Pizzas", "description": "Oven-baked cheesy pizzas"},
    {"name": "Burritos", "description": "Rolled Mexican delights"},
    {"name": "Sandwiches", "description": "Stacked and stuffed sandwiches"},
    {"name": "Wraps", "description": "Rolled up wraps packed with flavor"},
    {"name": "Bowls", "description": "Balanced rice and protein bowls"},
]

# =============================================================================
# Customizations
# =============================================================================

CUSTOMIZATIONS: list[CustomizationData] = [
    # Toppings
    {"name": "Extra Cheese", "price": 25, "type": "topping"},
    {"name": "Jalapeños", "price": 20, "type": "topping"},
    {"name": "Onions", "price": 10, "type": "topping"},
    {"name": "Olives", "price": 15, "type": "topping"},
    {"name": "Mushrooms", "price": 18, "type": "topping"},
    {"name": "Tomatoes", "price": 10, "type": "topping"},
    {"name": "Bacon", "price": 30, "type": "topping"},
    {"name": "Avocado", "price": 35, "type": "topping"},
    # Sides
    {"name": "Coke", "price": 30, "type": "side"},
    {"name": "Fries", "price": 35, "type": "side"},
    {"name": "Garlic Bread", "price": 40, "type": "side"},
    {"name": "Chicken Nuggets", "price": 50, "type": "side"},
    {"name": "Iced Tea", "price": 28, "type": "side"},
    {"name": "Salad", "price": 33, "type": "side"},
    {"name": "Potato Wedges", "price": 38, "type": "side"},
    {"name": "Mozzarella Sticks", "price": 45, "type": "side"},
    # Sizes and crusts
    {"name": "Large", "price": 40, "type": "size"},
    {"name": "Stuffed Crust", "price": 45, "type": "crust"},
]

# =============================================================================
# Menu items
# =============================================================================

MENU: list[MenuItemData] = [
    {
        "name": "Classic Cheeseburger",
        "description": "Beef patty, cheese, lettuce, tomato",
        "image_url": "https://static.vecteezy.com/system/resources/previews/044/844/600/large_2x/homemade-fresh-tasty-burger-with-meat-and-cheese-classic-cheese-burger-and-vegetable-ai-generated-free-png.png",
        "price": 25.99,
        "rating": 4.5,
        "calories": 550,
        "protein": 25,
        "category_name": "Burgers",
        "customizations": ["Extra Cheese", "Coke", "Fries", "Onions", "Bacon"],
    },
    {
        "name": "Pepperoni Pizza",
        "description": "Loaded with cheese and pepperoni slices",
        "image_url": "https://static.vecteezy.com/system/resources/previews/023/742/417/large_2x/pepperoni-pizza-isolated-illustration-ai-generative-free-png.png",
        "price": 30.99,
        "rating": 4.7,
        "calories": 700,
        "protein": 30,
        "category_name": "Pizzas",
        "customizations": ["Extra Cheese", "Jalapeños", "Garlic Bread", "Coke", "Olives", "Stuffed Crust"],
    },
    {
        "name": "Margherita",
        "description": "Tomato, mozzarella and fresh basil",
        "image_url": "https://static.vecteezy.com/system/resources/previews/024/589/160/large_2x/margherita-pizza-isolated-free-png.png",
        "price": 22.5,
        "rating": 4.6,
        "calories": 620,
        "protein": 24,
        "category_name": "Pizzas",
        "customizations": ["Extra Cheese", "Mushrooms", "Large"],
    },
    {
        "name": "Bean Burrito",
        "description": "Stuffed with beans, rice, salsa",
        "image_url": "https://static.vecteezy.com/system/resources/previews/055/133/581/large_2x/deliciously-grilled-burritos-filled-with-beans-corn-and-fresh-vegetables-served-with-lime-wedge-and-cilantro-isolated-on-transparent-background-free-png.png",
        "price": 20.99,
        "rating": 4.2,
        "calories": 480,
        "protein": 18,
        "category_name": "Burritos",
        "customizations": ["Jalapeños", "Iced Tea", "Fries", "Salad"],
    },
    {
        "name": "BBQ Bacon Burger",
        "description": "Smoky BBQ sauce, crispy bacon, cheddar",
        "image_url": "https://static.vecteezy.com/system/resources/previews/060/236/245/large_2x/a-large-hamburger-with-cheese-onions-and-lettuce-free-png.png",
        "price": 27.5,
        "rating": 4.8,
        "calories": 650,
        "protein": 29,
        "category_name": "Burgers",
        "customizations": ["Onions", "Fries", "Coke", "Bacon", "Avocado"],
    },
    {
        "name": "Chicken Caesar Wrap",
        "description": "Grilled chicken, lettuce, Caesar dressing",
        "image_url": "https://static.vecteezy.com/system/resources/previews/048/930/603/large_2x/caesar-wrap-grilled-chicken-isolated-on-transparent-background-free-png.png",
        "price": 21.5,
        "rating": 4.4,
        "calories": 490,
        "protein": 28,
        "category_name": "Wraps",
        "customizations": ["Extra Cheese", "Coke", "Potato Wedges", "Tomatoes"],
    },
    {
        "name": "Grilled Veggie Sandwich",
        "description": "Roasted veggies, pesto, cheese",
        "image_url": "https://static.vecteezy.com/system/resources/previews/047/832/012/large_2x/grilled-sesame-seed-bread-veggie-sandwich-with-tomato-and-onion-free-png.png",
        "price": 19.99,
        "rating": 4.1,
        "calories": 420,
        "protein": 19,
        "category_name": "Sandwiches",
        "customizations": ["Mushrooms", "Olives", "Mozzarella Sticks", "Iced Tea"],
    },
    {
        "name": "Chicken Teriyaki Bowl",
        "description": "Chicken, rice, teriyaki sauce, veggies",
        "image_url": "https://static.vecteezy.com/system/resources/previews/051/054/226/large_2x/teriyaki-chicken-rice-bowl-isolated-on-transparent-background-free-png.png",
        "price": 24.5,
        "rating": 4.5,
        "calories": 560,
        "protein": 33,
        "category_name": "Bowls",
        "customizations": ["Avocado", "Salad", "Iced Tea", "Chicken Nuggets"],
    },
]

DATA: CatalogData = {
    "categories": CATEGORIES,
    "customizations": CUSTOMIZATIONS,
    "menu": MENU,
}
