# src/meal_kit/nutrition/metabolism.py

"""Basal metabolic rate and daily energy expenditure (Mifflin-St Jeor)."""

from pydantic import BaseModel, Field

ACTIVITY_MULTIPLIERS = (
    ("lightly active", 1.375),
    ("moderately active", 1.55),
    ("very active", 1.725),
    ("extra active", 1.9),
)
SEDENTARY_MULTIPLIER = 1.2


class UserProfile(BaseModel):
    age: int = Field(gt=0)
    height_cm: float = Field(gt=0)
    weight_kg: float = Field(gt=0)
    is_male: bool
    activity_level: str = "Sedentary"

    class Config:
        extra = "forbid"


class UserSummary(BaseModel):
    profile: UserProfile
    bmr: float
    tdee: float


def calculate_bmr(age: int, height_cm: float, weight_kg: float, is_male: bool) -> float:
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + 5 if is_male else base - 161


def activity_multiplier(activity_level: str) -> float:
    level = activity_level.lower()
    for label, multiplier in ACTIVITY_MULTIPLIERS:
        if label in level:
            return multiplier
    return SEDENTARY_MULTIPLIER


def calculate_tdee(bmr: float, activity_level: str) -> float:
    return bmr * activity_multiplier(activity_level)


def summarize_user(profile: UserProfile) -> UserSummary:
    bmr = calculate_bmr(profile.age, profile.height_cm, profile.weight_kg, profile.is_male)
    return UserSummary(
        profile=profile,
        bmr=bmr,
        tdee=calculate_tdee(bmr, profile.activity_level),
    )
