"""Recipe records as found in the Hello Fresh page payload.

The page payload is camelCase (``seoName``, ``descriptionHTML``...), the
records we emit use PascalCase (``SeoName``, ``DescriptionHTML``...). Keys are
matched case-insensitively on the way in, unknown keys are ignored and
``null`` leaves a field at its default.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # lowercased wire or attribute name -> wire name, filled per subclass
    _wire_keys: ClassVar[Dict[str, str]] = {}

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        keys: Dict[str, str] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            keys[name.lower()] = alias
            keys[alias.lower()] = alias
        cls._wire_keys = keys

    @model_validator(mode="before")
    @classmethod
    def match_wire_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        matched: Dict[str, Any] = {}
        for key, value in data.items():
            if value is None:
                continue
            if isinstance(key, str):
                key = cls._wire_keys.get(key.lower(), key)
            matched[key] = value
        return matched


class Category(WireModel):
    id: str = Field("", alias="ID")
    type: str = Field("", alias="Type")
    name: str = Field("", alias="Name")
    slug: str = Field("", alias="Slug")
    icon_link: str = Field("", alias="IconLink")
    icon_path: str = Field("", alias="IconPath")
    usage: int = Field(0, alias="Usage")


class Nutrition(WireModel):
    type: str = Field("", alias="Type")
    name: str = Field("", alias="Name")
    amount: float = Field(0.0, alias="Amount")
    unit: str = Field("", alias="Unit")


class IngredientFamily(WireModel):
    id: str = Field("", alias="ID")
    type: str = Field("", alias="Type")
    description: str = Field("", alias="Description")
    priority: int = Field(0, alias="Priority")
    icon_link: str = Field("", alias="IconLink")
    icon_path: str = Field("", alias="IconPath")
    usage_by_country: Dict[str, int] = Field(default_factory=dict, alias="UsageByCountry")
    created_at: Optional[datetime] = Field(None, alias="CreatedAt")
    updated_at: Optional[datetime] = Field(None, alias="UpdatedAt")
    uuid: str = Field("", alias="UUID")
    name: str = Field("", alias="Name")
    slug: str = Field("", alias="Slug")


class Ingredient(WireModel):
    country: str = Field("", alias="Country")
    id: str = Field("", alias="ID")
    type: str = Field("", alias="Type")
    name: str = Field("", alias="Name")
    slug: str = Field("", alias="Slug")
    description: str = Field("", alias="Description")
    internal_name: str = Field("", alias="InternalName")
    shipped: bool = Field(False, alias="Shipped")
    image_link: str = Field("", alias="ImageLink")
    image_path: str = Field("", alias="ImagePath")
    usage: int = Field(0, alias="Usage")
    has_duplicated_name: bool = Field(False, alias="HasDuplicatedName")
    allergens: List[str] = Field(default_factory=list, alias="Allergens")
    family: IngredientFamily = Field(default_factory=IngredientFamily, alias="Family")
    uuid: str = Field("", alias="UUID")


class Allergen(WireModel):
    id: str = Field("", alias="ID")
    type: str = Field("", alias="Type")
    description: str = Field("", alias="Description")
    traces_of: bool = Field(False, alias="TracesOf")
    triggers_traces_of: bool = Field(False, alias="TriggersTracesOf")
    icon_link: str = Field("", alias="IconLink")
    icon_path: str = Field("", alias="IconPath")
    usage: int = Field(0, alias="Usage")
    name: str = Field("", alias="Name")
    slug: str = Field("", alias="Slug")


class Utensil(WireModel):
    id: str = Field("", alias="ID")
    type: str = Field("", alias="Type")
    name: str = Field("", alias="Name")


class Tag(WireModel):
    id: str = Field("", alias="ID")
    type: str = Field("", alias="Type")
    icon_link: str = Field("", alias="IconLink")
    icon_path: str = Field("", alias="IconPath")
    number_of_recipes: int = Field(0, alias="NumberOfRecipes")
    number_of_recipes_by_country: Dict[str, int] = Field(
        default_factory=dict, alias="NumberOfRecipesByCountry"
    )
    color_handle: str = Field("", alias="ColorHandle")
    preferences: List[str] = Field(default_factory=list, alias="Preferences")
    name: str = Field("", alias="Name")
    slug: str = Field("", alias="Slug")
    display_label: bool = Field(False, alias="DisplayLabel")


class Cuisine(WireModel):
    id: str = Field("", alias="ID")
    type: str = Field("", alias="Type")
    icon_link: str = Field("", alias="IconLink")
    icon_path: str = Field("", alias="IconPath")
    usage: int = Field(0, alias="Usage")
    name: str = Field("", alias="Name")
    slug: str = Field("", alias="Slug")


class IngredientYield(WireModel):
    """Quantity of one ingredient for a serving size.

    ``id`` is a two-phase field. As decoded it holds the ``ID`` of an
    ingredient in the owning recipe's ``ingredients``; after
    ``yield_ids_to_names`` it holds that ingredient's ``Name``. The wire
    format has a single ``ID`` key for both.
    """

    id: str = Field("", alias="ID")
    amount: float = Field(0.0, alias="Amount")
    unit: str = Field("", alias="Unit")


class Yield(WireModel):
    yields: int = Field(0, alias="Yields")
    ingredients: List[IngredientYield] = Field(default_factory=list, alias="Ingredients")


class Recipe(WireModel):
    id: str = Field("", alias="ID")
    country: str = Field("", alias="Country")
    name: str = Field("", alias="Name")
    seo_name: str = Field("", alias="SeoName")
    category: Category = Field(default_factory=Category, alias="Category")
    slug: str = Field("", alias="Slug")
    headline: str = Field("", alias="Headline")
    description: str = Field("", alias="Description")
    description_html: str = Field("", alias="DescriptionHTML")
    description_markdown: str = Field("", alias="DescriptionMarkdown")
    seo_description: str = Field("", alias="SeoDescription")
    comment: str = Field("", alias="Comment")
    difficulty: int = Field(0, alias="Difficulty")
    prep_time: str = Field("", alias="PrepTime")
    total_time: str = Field("", alias="TotalTime")
    serving_size: int = Field(0, alias="ServingSize")
    created_at: Optional[datetime] = Field(None, alias="CreatedAt")
    updated_at: Optional[datetime] = Field(None, alias="UpdatedAt")
    link: str = Field("", alias="Link")
    image_link: str = Field("", alias="ImageLink")
    image_path: str = Field("", alias="ImagePath")
    card_link: str = Field("", alias="CardLink")
    video_link: str = Field("", alias="VideoLink")
    nutrition: List[Nutrition] = Field(default_factory=list, alias="Nutrition")
    ingredients: List[Ingredient] = Field(default_factory=list, alias="Ingredients")
    allergens: List[Allergen] = Field(default_factory=list, alias="Allergens")
    utensils: List[Utensil] = Field(default_factory=list, alias="Utensils")
    tags: List[Tag] = Field(default_factory=list, alias="Tags")
    cuisines: List[Cuisine] = Field(default_factory=list, alias="Cuisines")
    yields: List[Yield] = Field(default_factory=list, alias="Yields")


class RecipeCollection(WireModel):
    """The ``data`` of a cached query that lists recipes."""

    items: List[Recipe] = Field(default_factory=list, alias="Items")


class Recipes(RootModel[List[Recipe]]):
    """An ordered batch of recipes from one page."""

    root: List[Recipe] = Field(default_factory=list)

    def __iter__(self) -> Iterator[Recipe]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Recipe:
        return self.root[index]

    def yield_ids_to_names(self) -> None:
        """Replace every IngredientYield id with its ingredient name, in place."""
        from hello_fresh_scrape.resolve.yields import yield_ids_to_names

        yield_ids_to_names(self.root)
