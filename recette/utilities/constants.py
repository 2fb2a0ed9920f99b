from typing import Final

DIFFICULTY_OPTIONS: Final[tuple[str, ...]] = ("簡単", "普通", "難しい")
DEFAULT_DIFFICULTY: Final[str] = "簡単"

# "4人分" / "4人前" -> serves 4
SERVING_SUFFIXES: Final[tuple[str, ...]] = ("人分", "人前")
INGREDIENT_SEPARATOR: Final[str] = " + "

BUDGET_DECORATIONS: Final[tuple[str, ...]] = ("¥", "￥", "円", ",")
# "¥1000-": only one trailing mark is dropped, "1000-1500" stays unparseable
BUDGET_TRAILING_MARK: Final[str] = "-"
CALORIE_DECORATIONS: Final[tuple[str, ...]] = ("kcal", ",")

MIN_PASSWORD_LENGTH: Final[int] = 6
