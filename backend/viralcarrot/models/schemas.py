# viralcarrot/models/schemas.py
# Pydantic models for the recipe pipeline
# Field names are camelCase to match what the frontend sends and renders

from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

ORIGINAL_SOURCE = "ViralCarrot"
COMMUNITY_SOURCE = "ViralCarrot Community"

Difficulty = Literal["Easy", "Medium", "Hard"]


class RecipeFilters(BaseModel):
    cookingTime: Optional[str] = None   # "15" | "30" | "60"
    cuisine: Optional[str] = None
    mealType: Optional[str] = None
    dietaryStyle: Optional[str] = None

    @field_validator("cookingTime", "cuisine", "mealType", "dietaryStyle", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        # the form posts "" for unset selects and numbers for cooking time
        if v is None:
            return None
        s = str(v).strip()
        return s or None


class Nutrition(BaseModel):
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0


class IngredientMatch(BaseModel):
    availableIngredients: List[str] = Field(default_factory=list)
    missingIngredients: List[str] = Field(default_factory=list)
    matchPercentage: int = 0


class Recipe(BaseModel):
    id: str
    title: str
    description: str = ""
    image: str = ""
    ingredients: List[str] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    cookingTime: int = 30
    cuisine: Optional[str] = None
    mealType: Optional[str] = None
    dietaryStyle: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    source: str = ORIGINAL_SOURCE
    createdBy: Optional[str] = None
    rating: float = Field(0.0, ge=0, le=5)
    difficulty: Difficulty = "Medium"
    servings: int = 4
    nutrition: Nutrition = Field(default_factory=Nutrition)
    ingredientMatch: IngredientMatch = Field(default_factory=IngredientMatch)
    matchScore: float = 0.0
    isExternal: bool = False
    sourceUrl: Optional[str] = None


# ---------------------------------------------------------------------
# requests
# ---------------------------------------------------------------------
class GenerateRequest(BaseModel):
    mainFood: str = ""
    ingredients: List[str] = Field(default_factory=list)
    filters: RecipeFilters = Field(default_factory=RecipeFilters)
    page: int = 1

    @field_validator("ingredients", mode="before")
    @classmethod
    def _drop_blank(cls, v):
        return [str(x).strip() for x in (v or []) if x is not None and str(x).strip()]


class ExternalRequest(BaseModel):
    mainFood: str = ""
    ingredients: List[str] = Field(default_factory=list)
    filters: RecipeFilters = Field(default_factory=RecipeFilters)

    @field_validator("ingredients", mode="before")
    @classmethod
    def _drop_blank(cls, v):
        return [str(x).strip() for x in (v or []) if x is not None and str(x).strip()]


class PantryRequest(BaseModel):
    pantryIngredients: List[str] = Field(default_factory=list)
    filters: RecipeFilters = Field(default_factory=RecipeFilters)

    @field_validator("pantryIngredients", mode="before")
    @classmethod
    def _drop_blank(cls, v):
        return [str(x).strip() for x in (v or []) if x is not None and str(x).strip()]


# ---------------------------------------------------------------------
# responses
# ---------------------------------------------------------------------
class RankedPage(BaseModel):
    items: List[Recipe] = Field(default_factory=list)
    total: int = 0
    hasMore: bool = False


class GenerateResponse(BaseModel):
    success: bool = True
    recipes: List[Recipe] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    hasMore: bool = False


class ExternalResponse(BaseModel):
    success: bool = True
    recipes: List[Recipe] = Field(default_factory=list)
    total: int = 0
    sources: Dict[str, int] = Field(default_factory=dict)


class MatchSummary(BaseModel):
    highMatch: int = 0
    mediumMatch: int = 0
    lowMatch: int = 0


class PantryResponse(BaseModel):
    success: bool = True
    recipes: List[Recipe] = Field(default_factory=list)
    total: int = 0
    pantryIngredients: List[str] = Field(default_factory=list)
    matchSummary: MatchSummary = Field(default_factory=MatchSummary)


# ---------------------------------------------------------------------
# community (user-submitted) recipes
# ---------------------------------------------------------------------
class UserRecipeIn(BaseModel):
    title: str
    description: str = ""
    ingredients: List[str] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    cookingTime: int = 30
    cuisine: str = "International"
    mealType: str = "Dinner"
    dietaryStyle: str = "Regular"
    image: str = ""
    tags: List[str] = Field(default_factory=list)
    sourceUrl: Optional[str] = None
    isPublic: bool = True

    @field_validator("title")
    @classmethod
    def _title_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("title is required")
        return v


class UserRecipe(UserRecipeIn):
    id: str
    createdBy: str
    status: Literal["pending", "approved", "rejected"] = "pending"
    isApproved: bool = False
    createdAt: datetime
    updatedAt: datetime

    def to_recipe(self, **extra: Any) -> Recipe:
        return Recipe(
            id=self.id,
            title=self.title,
            description=self.description,
            image=self.image,
            ingredients=self.ingredients,
            steps=self.steps,
            cookingTime=self.cookingTime,
            cuisine=self.cuisine,
            mealType=self.mealType,
            dietaryStyle=self.dietaryStyle,
            tags=self.tags,
            source=COMMUNITY_SOURCE,
            createdBy=self.createdBy,
            isExternal=True,
            sourceUrl=self.sourceUrl,
            **extra,
        )


class UserRecipeListResponse(BaseModel):
    success: bool = True
    recipes: List[UserRecipe] = Field(default_factory=list)
    total: int = 0
