"""Prompts for the hosted vision models."""

BLIP_QUESTION = (
    "What food item is this? Please be specific about what you see in the image."
)

DETAILED_PROMPT = """Analyze this food image and provide nutritional information in the following markdown format:

# [Food Name]
## Serving Size
[serving size details]

## Nutritional Information
- Calories: [number] kcal
- Protein: [number]g
- Carbohydrates: [number]g
- Fats: [number]g
- Fiber: [number]g

## Ingredients
[list of ingredients]

## Allergens
[list of allergens if any]

## Dietary Notes
[vegan/vegetarian/gluten-free/etc]

Please be specific and detailed in your analysis."""

LLAVA_PROMPT = """Analyze this food image and provide the information in the following markdown format:

# [Food Name]

## Serving Size
[Specify approximate serving size in grams or standard measurements]

## Preparation
[Describe how the food appears to be prepared (e.g., grilled, baked, raw)]

## Description
[Provide a detailed description of what you see]

## Ingredients
[List visible or likely ingredients]

Please be specific and detailed in your analysis."""
