"""Sample catalog data and bulk recipe import."""

import logging
from typing import Any

from pydantic import ValidationError
from sqlalchemy.orm import Session

from tender.models.recipe import Recipe
from tender.schemas.recipe import RecipeCreate
from tender.services.recipe_service import RecipeService

logger = logging.getLogger(__name__)

SAMPLE_RECIPES: list[dict[str, Any]] = [
    {
        "name": "Pasta Carbonara",
        "description": "Classic Italian pasta with eggs, cheese, and pancetta",
        "cook_time": 25,
        "servings": 4,
        "difficulty": "medium",
        "cuisine": "italian",
        "emoji": "🍝",
        "ingredients": "350g spaghetti,100g pancetta,3 eggs,50g parmesan,2 cloves garlic,black pepper",
        "instructions": "1. Boil spaghetti in salted water until al dente. 2. Fry pancetta with garlic until crisp. 3. Beat eggs with grated parmesan and pepper. 4. Drain pasta, reserve some water. 5. Toss hot pasta with pancetta, remove from heat, stir in egg mixture with splash of pasta water until creamy.",
    },
    {
        "name": "Chicken Tacos",
        "description": "Flavorful Mexican tacos with seasoned chicken",
        "cook_time": 20,
        "servings": 4,
        "difficulty": "easy",
        "cuisine": "mexican",
        "emoji": "🌮",
        "ingredients": "500g chicken breast,1 tbsp oil,2 tsp taco seasoning,8 taco shells,lettuce,tomato,cheese,sour cream",
        "instructions": "1. Slice chicken and toss with seasoning. 2. Cook in skillet with oil over medium-high for 6-8 minutes. 3. Warm taco shells. 4. Fill shells with chicken and toppings.",
    },
    {
        "name": "Caesar Salad",
        "description": "Fresh romaine with creamy Caesar dressing",
        "cook_time": 15,
        "servings": 2,
        "difficulty": "easy",
        "cuisine": "american",
        "emoji": "🥗",
        "ingredients": "2 romaine hearts,50g parmesan,1 cup croutons,1/3 cup caesar dressing,1 lemon",
        "instructions": "1. Chop romaine and place in bowl. 2. Add croutons and grated parmesan. 3. Toss with dressing and a squeeze of lemon. 4. Serve immediately.",
    },
    {
        "name": "Beef Stir Fry",
        "description": "Quick and healthy Asian-inspired dish",
        "cook_time": 30,
        "servings": 4,
        "difficulty": "medium",
        "cuisine": "chinese",
        "emoji": "🥘",
        "ingredients": "500g beef strips,1 bell pepper,1 cup broccoli,2 tbsp soy sauce,2 cloves garlic,1 tsp ginger,1 tbsp oil",
        "instructions": "1. Heat oil in wok. 2. Stir fry beef for 3-4 minutes. 3. Add garlic and ginger for 30 seconds. 4. Add vegetables and cook 4-5 minutes. 5. Add soy sauce and toss to coat.",
    },
    {
        "name": "Margherita Pizza",
        "description": "Classic Italian pizza with fresh ingredients",
        "cook_time": 45,
        "servings": 4,
        "difficulty": "medium",
        "cuisine": "italian",
        "emoji": "🍕",
        "ingredients": "1 pizza dough,1/2 cup tomato sauce,200g mozzarella,fresh basil,1 tbsp olive oil",
        "instructions": "1. Preheat oven to 450F. 2. Roll dough and place on tray. 3. Spread sauce, add mozzarella. 4. Bake 10-12 minutes until crust is golden. 5. Top with basil and drizzle olive oil.",
    },
    {
        "name": "Sushi Rolls",
        "description": "Homemade maki rolls with fresh fish",
        "cook_time": 40,
        "servings": 4,
        "difficulty": "hard",
        "cuisine": "japanese",
        "emoji": "🍱",
        "ingredients": "2 cups sushi rice,2 tbsp rice vinegar,4 nori sheets,200g salmon,1 cucumber,1 avocado",
        "instructions": "1. Cook and season rice with vinegar. 2. Place nori on mat and spread rice thinly. 3. Add salmon, cucumber, avocado. 4. Roll tightly and slice into pieces.",
    },
    {
        "name": "Butter Chicken",
        "description": "Creamy Indian curry with tender chicken",
        "cook_time": 35,
        "servings": 4,
        "difficulty": "medium",
        "cuisine": "indian",
        "emoji": "🍛",
        "ingredients": "600g chicken thighs,2 tbsp butter,1 cup crushed tomatoes,1/2 cup cream,1 tbsp garam masala,2 cloves garlic",
        "instructions": "1. Brown chicken in butter. 2. Add garlic and spices and cook 1 minute. 3. Add tomatoes and simmer 15 minutes. 4. Stir in cream and simmer 5 more minutes. 5. Serve with rice.",
    },
    {
        "name": "Greek Gyros",
        "description": "Mediterranean wrap with tzatziki sauce",
        "cook_time": 25,
        "servings": 4,
        "difficulty": "medium",
        "cuisine": "greek",
        "emoji": "🥙",
        "ingredients": "500g chicken or lamb,4 pita breads,1 cup tzatziki,1 tomato,1 onion,lettuce",
        "instructions": "1. Season and grill meat until cooked through. 2. Slice thinly. 3. Warm pitas. 4. Fill with meat, veggies, and tzatziki.",
    },
    {
        "name": "Pad Thai",
        "description": "Classic Thai noodle dish",
        "cook_time": 30,
        "servings": 4,
        "difficulty": "medium",
        "cuisine": "thai",
        "emoji": "🍜",
        "ingredients": "200g rice noodles,200g shrimp,2 eggs,1 cup bean sprouts,1/4 cup peanuts,1 lime,3 tbsp pad thai sauce",
        "instructions": "1. Soak noodles in warm water. 2. Stir fry shrimp, then scramble eggs. 3. Add noodles and sauce. 4. Toss in bean sprouts. 5. Serve topped with peanuts and lime.",
    },
    {
        "name": "French Onion Soup",
        "description": "Rich soup with melted cheese topping",
        "cook_time": 60,
        "servings": 4,
        "difficulty": "medium",
        "cuisine": "french",
        "emoji": "🍲",
        "ingredients": "4 onions,2 tbsp butter,1L beef broth,4 slices bread,100g gruyere,1 tsp thyme",
        "instructions": "1. Slice onions and cook in butter over low heat 30 minutes until caramelized. 2. Add broth and thyme, simmer 20 minutes. 3. Pour into bowls, top with bread and cheese. 4. Broil until cheese melts.",
    },
    {
        "name": "Bibimbap",
        "description": "Korean rice bowl with vegetables and egg",
        "cook_time": 35,
        "servings": 2,
        "difficulty": "medium",
        "cuisine": "korean",
        "emoji": "🍚",
        "ingredients": "2 cups rice,200g beef,spinach,carrots,zucchini,2 eggs,gochujang",
        "instructions": "1. Cook rice. 2. Sauté vegetables and beef separately. 3. Fry eggs sunny-side up. 4. Arrange everything over rice and serve with gochujang.",
    },
    {
        "name": "Fish and Chips",
        "description": "British classic with crispy battered fish",
        "cook_time": 40,
        "servings": 4,
        "difficulty": "medium",
        "cuisine": "british",
        "emoji": "🐟",
        "ingredients": "4 cod fillets,4 potatoes,1 cup flour,1 cup beer,oil,salt",
        "instructions": "1. Cut potatoes into fries and fry until golden. 2. Mix flour and beer for batter. 3. Dip fish in batter and fry until crisp. 4. Serve hot with fries.",
    },
    {
        "name": "Ratatouille",
        "description": "French vegetable stew with tomato and herbs",
        "cook_time": 45,
        "servings": 4,
        "difficulty": "medium",
        "cuisine": "french",
        "emoji": "🍆",
        "ingredients": "1 eggplant,2 zucchini,3 roma tomatoes,1/2 onion,4 cloves garlic,400g crushed tomatoes,olive oil,herbs",
        "instructions": "1. Preheat oven to 375F. 2. Sauté onion and garlic in olive oil. 3. Add crushed tomatoes and simmer 15 minutes. 4. Pour sauce into baking dish, layer sliced vegetables. 5. Cover and bake 30 minutes.",
    },
    {
        "name": "Pho",
        "description": "Vietnamese beef noodle soup with aromatic broth",
        "cook_time": 90,
        "servings": 4,
        "difficulty": "hard",
        "cuisine": "vietnamese",
        "emoji": "🍲",
        "ingredients": "1 onion,1 piece ginger,8 cups beef stock,rice noodles,200g beef,spices,fish sauce",
        "instructions": "1. Char onion and ginger. 2. Simmer with spices and stock 30-40 minutes. 3. Cook rice noodles separately. 4. Add sliced beef to hot broth. 5. Serve over noodles with herbs.",
    },
    {
        "name": "Mac and Cheese",
        "description": "Classic baked macaroni and cheese",
        "cook_time": 40,
        "servings": 4,
        "difficulty": "easy",
        "cuisine": "american",
        "emoji": "🧀",
        "ingredients": "450g macaroni,6 tbsp butter,5 tbsp flour,2.5 cups milk,2 cups shredded cheese,1/2 cup breadcrumbs",
        "instructions": "1. Preheat oven to 400F. 2. Boil pasta until al dente. 3. Make roux with butter and flour, whisk in milk. 4. Stir in cheese until melted. 5. Combine with pasta, top with breadcrumbs, bake 15-20 minutes.",
    },
]

# Wikimedia Commons photos for seed recipes, by recipe name
SEED_IMAGES = {
    "Pasta Carbonara": "https://upload.wikimedia.org/wikipedia/commons/2/2d/Spaghetti_alla_Carbonara_(Madrid).JPG",
    "Chicken Tacos": "https://upload.wikimedia.org/wikipedia/commons/4/48/Chicken_tacos.jpg",
    "Caesar Salad": "https://upload.wikimedia.org/wikipedia/commons/d/d1/Caesar_salad_(1).jpg",
    "Beef Stir Fry": "https://upload.wikimedia.org/wikipedia/commons/5/58/Beef_and_broccoli_stir_fry.jpg",
    "Margherita Pizza": "https://upload.wikimedia.org/wikipedia/commons/d/d4/Margherita_Originale.JPG",
    "Sushi Rolls": "https://upload.wikimedia.org/wikipedia/commons/1/19/200408_Maki_Vari.JPG",
    "Butter Chicken": "https://upload.wikimedia.org/wikipedia/commons/3/3c/Chicken_makhani.jpg",
    "Pad Thai": "https://upload.wikimedia.org/wikipedia/commons/e/ed/Pad_Thai.JPG",
    "French Onion Soup": "https://upload.wikimedia.org/wikipedia/commons/8/86/Plate_french_onion_soup.jpg",
    "Pho": "https://upload.wikimedia.org/wikipedia/commons/b/b4/Chicken-pho-vietnamese-soup.JPG",
}


def import_recipes(db: Session, records: list[dict[str, Any]]) -> tuple[int, int]:
    """Add catalog recipes from raw records. Returns (imported, failed)."""
    service = RecipeService(db)
    imported = 0
    failed = 0
    for record in records:
        if not isinstance(record, dict) or not record.get("name"):
            logger.warning(f"Skipping recipe without a name: {str(record)[:60]}")
            failed += 1
            continue
        try:
            data = RecipeCreate.model_validate(record)
        except ValidationError as e:
            logger.warning(f"Skipping invalid recipe '{record['name']}': {e}")
            failed += 1
            continue
        service.create(None, data)
        imported += 1
    return imported, failed


def seed_sample_recipes(db: Session) -> int:
    """Insert the sample catalog if there are no recipes yet."""
    if db.query(Recipe.id).first() is not None:
        return 0
    imported, _ = import_recipes(db, SAMPLE_RECIPES)
    logger.info(f"Seeded {imported} sample recipes")
    return imported


def add_seed_images(db: Session) -> int:
    """Fill in photos for seed recipes that have none. Returns rows updated."""
    updated = 0
    for name, url in SEED_IMAGES.items():
        recipes = (
            db.query(Recipe)
            .filter(Recipe.name == name, Recipe.created_by.is_(None), Recipe.image.is_(None))
            .all()
        )
        for recipe in recipes:
            recipe.image = url
            updated += 1
    db.commit()
    return updated
