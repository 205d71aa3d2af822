"""
Статическое расписание: недельный сплит тренировок и два плана питания
(high-carb / low-carb). Калории указаны для всей порции.
"""
from typing import Dict, Tuple

from fittrack.schemas.schedule import (
    CarbType, Exercise, MealOption, MealPlan, Weekday, WorkoutDay
)

MEAL_SLOTS = range(1, 6)
SHAKE_TIME = "10:15 PM"

REST_DAY = WorkoutDay(name="Rest", exercises=())

WORKOUT_SCHEDULE: Dict[Weekday, WorkoutDay] = {
    Weekday.monday: WorkoutDay(name="Legs", exercises=(
        Exercise(name="Hack Squats", sets=4, rep_range="10-12"),
        Exercise(name="Leg Press", sets=4, rep_range="10-12"),
        Exercise(name="Lunges", sets=4, rep_range="12-15"),
        Exercise(name="Leg Curls", sets=4, rep_range="10-12"),
        Exercise(name="Leg Extensions", sets=4, rep_range="12-15"),
        Exercise(name="Calf Raises", sets=6, rep_range="15-20"),
    )),
    Weekday.tuesday: WorkoutDay(name="Arms & Shoulders", exercises=(
        Exercise(name="Seated Dumbbell Shoulder Press", sets=3, rep_range="8-10"),
        Exercise(name="Dumbbell Lateral Raises", sets=3, rep_range="12-15"),
        Exercise(name="Barbell Bicep Curls", sets=3, rep_range="8-10"),
        Exercise(name="Alternating Dumbbell Curls", sets=2, rep_range="10-12"),
        Exercise(name="Hammer Curls", sets=2, rep_range="12-15"),
        Exercise(name="Close-Grip Bench Press", sets=3, rep_range="8-10"),
        Exercise(name="Overhead Triceps Extension", sets=2, rep_range="10-12"),
        Exercise(name="Triceps Rope Pushdowns", sets=3, rep_range="12-15"),
    )),
    Weekday.wednesday: REST_DAY,
    Weekday.thursday: WorkoutDay(name="Chest & Triceps", exercises=(
        Exercise(name="Bench Press", sets=4, rep_range="8-10"),
        Exercise(name="Incline Dumbbell Press", sets=3, rep_range="10-12"),
        Exercise(name="Chest Flies", sets=3, rep_range="12-15"),
        Exercise(name="Incline Bench Press", sets=7, rep_range="Pyramid 15→6", is_pyramid=True),
        Exercise(name="Tricep Dips", sets=4, rep_range="10-12"),
        Exercise(name="Tricep Pushdowns", sets=6, rep_range="12-15"),
        Exercise(name="Overhead Tricep Extension", sets=6, rep_range="12-15"),
    )),
    Weekday.friday: WorkoutDay(name="Back & Biceps", exercises=(
        Exercise(name="Pull-Ups", sets=4, rep_range="8-10"),
        Exercise(name="Bent Over Rows", sets=4, rep_range="10-12"),
        Exercise(name="Lat Pulldowns", sets=4, rep_range="12-15"),
        Exercise(name="Single-Arm Dumbbell Rows", sets=4, rep_range="6-10"),
        Exercise(name="Hyper Extensions", sets=4, rep_range="15"),
        Exercise(name="Barbell Curls", sets=4, rep_range="10-12"),
        Exercise(name="Hammer Curls", sets=4, rep_range="12-15"),
        Exercise(name="Seated Rows", sets=4, rep_range="12-15"),
    )),
    Weekday.saturday: WorkoutDay(name="Shoulders & Triceps", exercises=(
        Exercise(name="Shoulder Press", sets=4, rep_range="8-10"),
        Exercise(name="Lateral Raises", sets=4, rep_range="12-15"),
        Exercise(name="Front Raises", sets=4, rep_range="12-15"),
        Exercise(name="Reverse Machine Flies", sets=4, rep_range="8-10"),
        Exercise(name="Reverse EZ Bar Pushdowns", sets=4, rep_range="10-12"),
        Exercise(name="Skull Crushers", sets=4, rep_range="12-15"),
        Exercise(name="Rope Tricep Pushdowns", sets=4, rep_range="12-15"),
    )),
    Weekday.sunday: REST_DAY,
}

# Единственный high-carb день в неделе — понедельник (ноги)
CARB_SCHEDULE: Dict[Weekday, CarbType] = {
    weekday: CarbType.high if weekday is Weekday.monday else CarbType.low
    for weekday in Weekday
}

CARDIO_DESCRIPTIONS: Dict[Weekday, str] = {
    weekday: "Rest Day" if weekday is Weekday.sunday else "30 min fasted cardio"
    for weekday in Weekday
}

LOW_CARB_MEALS: Tuple[MealPlan, ...] = (
    MealPlan(time="7:30 AM", title="Breakfast", options=(
        MealOption(
            description="2 whole eggs + 6 egg whites + 2 slices gluten-free toast + apple + multivitamin + 2 omega-3 capsules",
            calories=515,
        ),
        MealOption(
            description="1.5 scoops whey isolate + 50g oats + 150g strawberries + multivitamin + 2 omega-3",
            calories=540,
        ),
    )),
    MealPlan(time="10:00 AM", title="Mid-Morning Snack", options=(
        MealOption(description="1 scoop whey isolate + 250ml almond milk + orange", calories=212),
        MealOption(description="1 scoop MRE Lite + 200ml almond milk + orange", calories=210),
    )),
    MealPlan(time="1:00 PM", title="Lunch", options=(
        MealOption(description="150g chicken breast + 100g white rice + 2 cucumbers", calories=430),
        MealOption(description="150g chicken + 120g baked potato + 2 cucumbers", calories=440),
    )),
    MealPlan(time="4:00 PM", title="Pre-Workout", options=(
        MealOption(
            description="1 can tuna (in water) + salad (lettuce, parsley, green onion, cucumber, green peppers, vinegar)",
            calories=150,
        ),
        MealOption(description="150g chicken breast + same salad", calories=280),
    )),
    MealPlan(time="7:00 PM", title="Dinner", options=(
        MealOption(description="150g chicken with mustard + 120g basmati rice + cucumber", calories=430),
        MealOption(description="200g shrimp + 140g baked potato + cooked vegetables", calories=410),
    )),
)

HIGH_CARB_MEALS: Tuple[MealPlan, ...] = (
    MealPlan(time="7:30 AM", title="Breakfast", options=(
        MealOption(
            description="2 whole eggs + 4 egg whites + 2 slices whole wheat gluten-free toast + apple + multivitamin + 2 omega-3",
            calories=463,
        ),
        MealOption(
            description="1.5 scoops whey isolate + 60g oatmeal + 1 cup strawberries + multivitamin + 2 omega-3",
            calories=555,
        ),
    )),
    MealPlan(time="10:00 AM", title="Mid-Morning Snack", options=(
        MealOption(description="1 scoop whey isolate + 250ml almond milk", calories=150),
        MealOption(description="1 scoop MRE Lite + 200ml almond milk", calories=150),
    )),
    MealPlan(time="1:00 PM", title="Lunch", options=(
        MealOption(description="150g chicken + 150g white rice + 2 cucumbers", calories=480),
        MealOption(description="150g chicken + 170g baked potato + 2 cucumbers", calories=440),
    )),
    MealPlan(time="4:00 PM", title="Pre-Workout", options=(
        MealOption(description="250g shrimp + 150g white rice + mushrooms + vegetables", calories=450),
        MealOption(description="200g chicken + 200g baked potato + green veggies", calories=430),
    )),
    MealPlan(time="7:00 PM", title="Dinner (Cheat Meal)", options=(
        MealOption(description="Hamburger or cheeseburger + fries/sweet potato fries/onion rings", calories=850),
        MealOption(description="Steak + baked or mashed potato", calories=700),
    )),
)

MEAL_TABLES: Dict[CarbType, Tuple[MealPlan, ...]] = {
    CarbType.high: HIGH_CARB_MEALS,
    CarbType.low: LOW_CARB_MEALS,
}

POST_WORKOUT_SHAKES: Dict[CarbType, MealOption] = {
    CarbType.high: MealOption(
        description="2 scoops whey isolate + EAA + 5g glutamine + 5g creatine + 2g L-carnitine + 1 scoop carb powder",
        calories=390,
    ),
    CarbType.low: MealOption(
        description="1 scoop whey isolate + EAA + 5g glutamine + 5g creatine + 2g L-carnitine + 1 banana",
        calories=300,
    ),
}

COMFORT_FOOD = MealOption(
    description="Rice Cake + 1 tbsp Peanut Butter (sugar-free PB recommended)",
    calories=130,
)


class ScheduleTable:
    """Набор таблиц расписания. Передаётся в Scheduler явно, чтобы в тестах
    можно было подставить другие данные."""

    def __init__(
        self,
        workouts: Dict[Weekday, WorkoutDay] = WORKOUT_SCHEDULE,
        carbs: Dict[Weekday, CarbType] = CARB_SCHEDULE,
        meals: Dict[CarbType, Tuple[MealPlan, ...]] = MEAL_TABLES,
        shakes: Dict[CarbType, MealOption] = POST_WORKOUT_SHAKES,
        comfort_food: MealOption = COMFORT_FOOD,
        cardio: Dict[Weekday, str] = CARDIO_DESCRIPTIONS,
    ):
        missing = [day for day in Weekday if day not in workouts or day not in carbs or day not in cardio]
        if missing:
            raise ValueError(f"Schedule is missing weekdays: {missing}")
        for carb_type, plans in meals.items():
            if len(plans) != len(MEAL_SLOTS):
                raise ValueError(f"{carb_type.value}-carb table must have {len(MEAL_SLOTS)} meals")
        self.workouts = workouts
        self.carbs = carbs
        self.meals = meals
        self.shakes = shakes
        self.comfort_food = comfort_food
        self.cardio = cardio


default_schedule = ScheduleTable()
