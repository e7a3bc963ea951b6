# viralcarrot/models/templates.py
# Static lookup tables for recipe synthesis
# category -> sequence maps; keys are resolved case-insensitively by substring
# (see services.matcher.resolve_key)

from types import MappingProxyType

# === titles ===================================================================
TITLE_TEMPLATES = MappingProxyType({
    "chicken": (
        "Crispy Garlic Butter Chicken", "Honey Glazed Chicken Thighs",
        "Lemon Herb Roasted Chicken", "Spicy Buffalo Chicken Wings",
        "Creamy Chicken Alfredo", "Teriyaki Chicken Stir-Fry",
        "Mediterranean Chicken Skewers", "BBQ Chicken Breast",
        "Chicken Tikka Masala", "Parmesan Crusted Chicken",
    ),
    "beef": (
        "Classic Beef Stroganoff", "Juicy Beef Burgers",
        "Beef and Broccoli Stir-Fry", "Slow-Cooked Beef Stew",
        "Beef Tacos with Guacamole", "Beef Wellington",
        "Korean Beef Bulgogi", "Beef and Mushroom Risotto",
        "Beef Fajitas", "Beef Bourguignon",
    ),
    "salmon": (
        "Pan-Seared Salmon with Dill", "Honey Glazed Salmon",
        "Cedar Plank Salmon", "Salmon Teriyaki Bowl",
        "Lemon Garlic Salmon", "Salmon Poke Bowl",
        "Grilled Salmon with Herbs", "Salmon Caesar Salad",
        "Salmon Sushi Rolls", "Baked Salmon with Vegetables",
    ),
    "pasta": (
        "Creamy Carbonara Pasta", "Spaghetti Aglio e Olio",
        "Pasta Primavera", "Chicken Pesto Pasta",
        "Spicy Arrabbiata Pasta", "Pasta alla Vodka",
        "Lobster Ravioli", "Pasta with Marinara Sauce",
        "Cacio e Pepe", "Pasta with Meatballs",
    ),
    "rice": (
        "Spanish Paella", "Chicken Fried Rice",
        "Risotto Milanese", "Jambalaya Rice",
        "Biryani Rice Bowl", "Sushi Rice Rolls",
        "Coconut Rice Pudding", "Wild Rice Pilaf",
        "Rice and Beans", "Sticky Rice with Mango",
    ),
    "vegetables": (
        "Roasted Vegetable Medley", "Stuffed Bell Peppers",
        "Ratatouille", "Vegetable Stir-Fry",
        "Grilled Vegetable Skewers", "Vegetable Curry",
        "Stuffed Zucchini", "Roasted Brussels Sprouts",
        "Vegetable Lasagna", "Caprese Salad",
    ),
    "fish": (
        "Fish and Chips", "Pan-Fried Fish with Lemon",
        "Fish Tacos", "Baked Fish with Herbs",
        "Fish Curry", "Grilled Fish Steaks",
        "Fish Ceviche", "Fish Chowder",
        "Fish Tempura", "Mediterranean Fish Stew",
    ),
    "shrimp": (
        "Garlic Butter Shrimp", "Shrimp Scampi",
        "Coconut Shrimp", "Shrimp Fried Rice",
        "Shrimp Tacos", "Shrimp and Grits",
        "Shrimp Pad Thai", "Shrimp Cocktail",
        "Shrimp Stir-Fry", "Shrimp Etouffee",
    ),
    "octopus": (
        "Grilled Octopus with Chimichurri", "Octopus Carpaccio",
        "Spanish Octopus Tapas", "Octopus Ceviche",
        "Braised Octopus Stew", "Octopus Salad",
        "Octopus Pasta", "Mediterranean Octopus",
        "Octopus with Potatoes", "Octopus Rice Bowl",
    ),
    "lamb": (
        "Rack of Lamb with Herbs", "Lamb Chops with Mint",
        "Lamb Curry", "Lamb Gyros",
        "Braised Lamb Shanks", "Lamb Kebabs",
        "Lamb Stew", "Lamb Biryani",
        "Lamb Tagine", "Lamb Burgers",
    ),
    "pork": (
        "Pork Tenderloin with Apples", "Pulled Pork Sandwich",
        "Pork Chops with Sage", "Pork Belly Bao Buns",
        "Pork Stir-Fry", "Pork Carnitas",
        "Pork Schnitzel", "Pork and Beans",
        "Pork Dumplings", "Pork Loin Roast",
    ),
    "tofu": (
        "Crispy Tofu Stir-Fry", "Tofu Scramble",
        "Mapo Tofu", "Tofu Buddha Bowl",
        "Tofu Curry", "Tofu Tacos",
        "Tofu Pad Thai", "Sesame Glazed Tofu",
        "Tofu Soup", "Tofu Teriyaki",
    ),
    "eggs": (
        "Perfect Scrambled Eggs", "Eggs Benedict",
        "Shakshuka", "French Omelette",
        "Eggs Florentine", "Egg Fried Rice",
        "Egg Salad Sandwich", "Quiche Lorraine",
        "Egg Drop Soup", "Deviled Eggs",
    ),
    "cheese": (
        "Three Cheese Mac and Cheese", "Cheese Fondue",
        "Grilled Cheese Sandwich", "Cheese Platter",
        "Cheese Soufflé", "Cheese Quesadillas",
        "Cheese Pizza", "Cheese and Crackers",
        "Cheese Stuffed Mushrooms", "Cheese Board",
    ),
    "mushroom": (
        "Creamy Mushroom Risotto", "Stuffed Mushrooms",
        "Mushroom Stroganoff", "Mushroom Soup",
        "Grilled Portobello Mushrooms", "Mushroom Pasta",
        "Mushroom Stir-Fry", "Mushroom Pizza",
        "Mushroom Gravy", "Mushroom Tacos",
    ),
    "potato": (
        "Crispy Roasted Potatoes", "Loaded Baked Potatoes",
        "Potato Gnocchi", "Mashed Potatoes",
        "Potato Salad", "French Fries",
        "Potato Soup", "Scalloped Potatoes",
        "Potato Pancakes", "Sweet Potato Fries",
    ),
    "bread": (
        "Artisan Sourdough Bread", "Garlic Bread",
        "Banana Bread", "Focaccia Bread",
        "Brioche French Toast", "Bread Pudding",
        "Garlic Naan", "Cornbread",
        "Breadsticks", "Cinnamon Rolls",
    ),
})

# {food} is filled with the display form of the main food
GENERIC_TITLE_TEMPLATES = (
    "Delicious {food} Recipe",
    "Homestyle {food}",
    "Easy Weeknight {food}",
    "Classic {food} Recipe",
    "Simple Skillet {food}",
)

EXTERNAL_GENERIC_TITLE_TEMPLATES = (
    "Best {food} Recipe",
    "Easy {food} from {source}",
    "Popular {food} Dish",
    "Classic {food} Recipe",
    "Award-Winning {food}",
)

COOKING_METHODS = (
    "Pan-Seared", "Grilled", "Roasted", "Braised", "Sautéed", "Baked",
    "Fried", "Steamed", "Poached", "Smoked", "Slow-Cooked", "Quick-Fried",
)

FLAVOR_ENHANCERS = (
    "Garlic Butter", "Lemon Herb", "Spicy", "Creamy", "Honey Glazed",
    "Teriyaki", "Mediterranean", "Asian-Inspired", "Smoky", "Tangy",
)

CUISINE_MODIFIERS = MappingProxyType({
    "italian": ("Tuscan", "Rustic Italian", "Roman-Style"),
    "mexican": ("Mexican-Style", "Baja", "Oaxacan"),
    "chinese": ("Sichuan", "Cantonese-Style", "Wok-Fired"),
    "japanese": ("Japanese-Style", "Miso", "Izakaya"),
    "thai": ("Thai Basil", "Bangkok-Style", "Thai Curry"),
    "indian": ("Tandoori", "Masala", "Punjabi-Style"),
    "korean": ("Korean BBQ", "Gochujang", "Seoul-Style"),
    "mediterranean": ("Mediterranean", "Aegean", "Sun-Dried Tomato"),
    "greek": ("Greek", "Lemon-Oregano", "Athenian"),
    "french": ("French Bistro", "Provençal", "Parisian"),
    "spanish": ("Spanish", "Smoked Paprika", "Andalusian"),
    "american": ("Southern-Style", "Classic American", "Smokehouse"),
    "middle eastern": ("Za'atar", "Shawarma-Spiced", "Levantine"),
    "asian": ("Asian-Fusion", "Ginger Soy", "Sesame"),
})

# === ingredients ==============================================================
# staples appended after the main food itself
COMMON_INGREDIENTS = MappingProxyType({
    "chicken": ("olive oil", "salt", "black pepper", "garlic", "onion"),
    "beef": ("olive oil", "salt", "black pepper", "garlic", "onion"),
    "salmon": ("olive oil", "salt", "black pepper", "lemon", "dill"),
    "pasta": ("olive oil", "garlic", "salt", "parmesan cheese", "basil"),
    "rice": ("vegetable oil", "onion", "garlic", "salt", "chicken broth"),
    "vegetables": ("olive oil", "salt", "black pepper", "garlic", "herbs"),
    "fish": ("olive oil", "salt", "black pepper", "lemon", "parsley"),
    "shrimp": ("butter", "garlic", "salt", "black pepper", "lemon"),
    "octopus": ("olive oil", "salt", "lemon", "garlic", "paprika"),
    "lamb": ("olive oil", "salt", "black pepper", "garlic", "rosemary"),
    "pork": ("olive oil", "salt", "black pepper", "garlic", "onion"),
    "tofu": ("soy sauce", "garlic", "ginger", "sesame oil", "scallions"),
    "eggs": ("butter", "salt", "black pepper", "milk", "chives"),
    "cheese": ("butter", "flour", "milk", "salt", "black pepper"),
    "mushroom": ("butter", "garlic", "thyme", "salt", "black pepper"),
    "potato": ("olive oil", "salt", "black pepper", "garlic", "rosemary"),
    "bread": ("flour", "yeast", "salt", "water", "olive oil"),
})

GENERIC_INGREDIENTS = ("olive oil", "salt", "black pepper", "garlic", "onion")

# mock external recipes share one staple list
EXTERNAL_COMMON_INGREDIENTS = (
    "salt", "black pepper", "olive oil", "garlic", "onion", "butter",
    "lemon", "herbs", "spices", "vegetables",
)

CUISINE_INGREDIENTS = MappingProxyType({
    "italian": ("basil", "parmesan cheese", "oregano"),
    "mexican": ("cumin", "lime", "cilantro"),
    "chinese": ("soy sauce", "ginger", "scallions"),
    "japanese": ("soy sauce", "mirin", "sesame seeds"),
    "thai": ("fish sauce", "lime", "lemongrass"),
    "indian": ("garam masala", "turmeric", "ginger"),
    "korean": ("gochujang", "sesame oil", "scallions"),
    "mediterranean": ("lemon", "oregano", "feta cheese"),
    "greek": ("oregano", "lemon", "feta cheese"),
    "french": ("shallots", "thyme", "butter"),
    "spanish": ("smoked paprika", "saffron", "bell pepper"),
    "american": ("paprika", "brown sugar", "butter"),
    "middle eastern": ("cumin", "sumac", "tahini"),
    "asian": ("soy sauce", "ginger", "sesame oil"),
})

MAX_INGREDIENTS = 12
MAX_EXTERNAL_INGREDIENTS = 10
MAX_CUISINE_INGREDIENTS = 2

# drives the "add the vegetables" step; aromatics every staple list carries are left out
VEGETABLES = (
    "bell pepper", "carrot", "broccoli", "tomato",
    "zucchini", "spinach", "mushroom", "celery", "peas", "scallion",
)

# === difficulty ===============================================================
HARD_FOODS = ("octopus", "lamb", "beef wellington", "soufflé", "souffle")

# === nutrition ================================================================
# per-serving base values; jitter is added by the synthesizer
NUTRITION_BASE = MappingProxyType({
    "chicken": {"calories": 250, "protein": 30, "carbs": 5, "fat": 12},
    "beef": {"calories": 320, "protein": 28, "carbs": 5, "fat": 20},
    "salmon": {"calories": 280, "protein": 26, "carbs": 2, "fat": 17},
    "pasta": {"calories": 380, "protein": 12, "carbs": 60, "fat": 10},
    "rice": {"calories": 300, "protein": 7, "carbs": 55, "fat": 6},
    "vegetables": {"calories": 150, "protein": 5, "carbs": 22, "fat": 6},
    "fish": {"calories": 220, "protein": 25, "carbs": 3, "fat": 10},
    "shrimp": {"calories": 200, "protein": 24, "carbs": 4, "fat": 9},
    "octopus": {"calories": 190, "protein": 27, "carbs": 6, "fat": 5},
    "lamb": {"calories": 340, "protein": 26, "carbs": 3, "fat": 24},
    "pork": {"calories": 310, "protein": 27, "carbs": 4, "fat": 20},
    "tofu": {"calories": 180, "protein": 16, "carbs": 8, "fat": 10},
    "eggs": {"calories": 210, "protein": 14, "carbs": 3, "fat": 15},
    "cheese": {"calories": 360, "protein": 18, "carbs": 20, "fat": 24},
    "mushroom": {"calories": 130, "protein": 6, "carbs": 14, "fat": 6},
    "potato": {"calories": 260, "protein": 5, "carbs": 45, "fat": 8},
    "bread": {"calories": 290, "protein": 9, "carbs": 50, "fat": 6},
})

GENERIC_NUTRITION = {"calories": 150, "protein": 10, "carbs": 20, "fat": 5}

# upper bounds (exclusive) of the random jitter per field
NUTRITION_JITTER = {"calories": 200, "protein": 20, "carbs": 30, "fat": 15}

# === images ===================================================================
FALLBACK_IMAGES = MappingProxyType({
    "chicken": (
        "https://images.unsplash.com/photo-1604503468506-a8da13d82791?w=800",
        "https://images.unsplash.com/photo-1598103442097-8b74394b95c6?w=800",
        "https://images.unsplash.com/photo-1603133872878-684f208fb84b?w=800",
    ),
    "beef": (
        "https://images.unsplash.com/photo-1546833999-b9f581a1996d?w=800",
        "https://images.unsplash.com/photo-1529692236671-f1f6cf9683ba?w=800",
        "https://images.unsplash.com/photo-1574484284002-952d92456975?w=800",
    ),
    "salmon": (
        "https://images.unsplash.com/photo-1467003909585-2f8a72700288?w=800",
        "https://images.unsplash.com/photo-1519708227418-c8fd9a32b7a2?w=800",
        "https://images.unsplash.com/photo-1551218808-94e220e084d2?w=800",
    ),
    "pasta": (
        "https://images.unsplash.com/photo-1621996346565-e3dbc353d2e5?w=800",
        "https://images.unsplash.com/photo-1551183053-bf91a1d81141?w=800",
        "https://images.unsplash.com/photo-1476124369491-e7addf5db371?w=800",
    ),
    "rice": (
        "https://images.unsplash.com/photo-1586201375761-83865001e31c?w=800",
        "https://images.unsplash.com/photo-1512058564366-18510be2db19?w=800",
        "https://images.unsplash.com/photo-1476124369491-e7addf5db371?w=800",
    ),
    "vegetables": (
        "https://images.unsplash.com/photo-1540420773420-3366772f4999?w=800",
        "https://images.unsplash.com/photo-1512621776951-a57141f2eefd?w=800",
        "https://images.unsplash.com/photo-1572441713132-51c75654db73?w=800",
    ),
    "fish": (
        "https://images.unsplash.com/photo-1467003909585-2f8a72700288?w=800",
        "https://images.unsplash.com/photo-1519708227418-c8fd9a32b7a2?w=800",
        "https://images.unsplash.com/photo-1551218808-94e220e084d2?w=800",
    ),
    "shrimp": (
        "https://images.unsplash.com/photo-1551218808-94e220e084d2?w=800",
        "https://images.unsplash.com/photo-1559847844-5315695dadae?w=800",
        "https://images.unsplash.com/photo-1585937421612-70a008356fbe?w=800",
    ),
    "octopus": (
        "https://images.unsplash.com/photo-1551218808-94e220e084d2?w=800",
        "https://images.unsplash.com/photo-1519708227418-c8fd9a32b7a2?w=800",
        "https://images.unsplash.com/photo-1559847844-5315695dadae?w=800",
    ),
    "tofu": (
        "https://images.unsplash.com/photo-1603133872878-684f208fb84b?w=800",
        "https://images.unsplash.com/photo-1512621776951-a57141f2eefd?w=800",
        "https://images.unsplash.com/photo-1540420773420-3366772f4999?w=800",
    ),
    "eggs": (
        "https://images.unsplash.com/photo-1572441713132-51c75654db73?w=800",
        "https://images.unsplash.com/photo-1512058564366-18510be2db19?w=800",
        "https://images.unsplash.com/photo-1540420773420-3366772f4999?w=800",
    ),
    "mushroom": (
        "https://images.unsplash.com/photo-1476124369491-e7addf5db371?w=800",
        "https://images.unsplash.com/photo-1547592166-23ac45744acd?w=800",
        "https://images.unsplash.com/photo-1540420773420-3366772f4999?w=800",
    ),
})

DEFAULT_IMAGE = "https://images.unsplash.com/photo-1556909114-f6e7ad7d3136?w=800"

# image-search content filter vocabularies (matched against the photo description)
LIVE_ANIMAL_TERMS = (
    "live chicken", "live animal", "livestock", "farm animal", "hen", "rooster",
    "chick", "cow", "cattle", "calf", "pig", "piglet", "sheep", "lamb grazing",
    "goat", "butcher", "slaughter", "barn", "poultry farm", "fish swimming",
    "aquarium", "underwater",
)

FOOD_TERMS = (
    "cooked", "grilled", "roasted", "baked", "fried", "plated", "dish", "meal",
    "food", "recipe", "served", "bowl", "plate", "sauce", "dinner", "lunch",
    "breakfast", "delicious", "homemade", "seared",
)

SEARCH_COOKING_METHODS = ("grilled", "roasted", "pan-seared", "baked", "fried", "steamed")

# === mock external providers ==================================================
EXTERNAL_PROVIDERS = (
    {"name": "AllRecipes", "baseUrl": "https://www.allrecipes.com"},
    {"name": "FoodNetwork", "baseUrl": "https://www.foodnetwork.com"},
    {"name": "BBCGoodFood", "baseUrl": "https://www.bbcgoodfood.com"},
)
