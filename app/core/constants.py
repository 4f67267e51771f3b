"""Application constants."""

# Workout intensity: RPE at or above this is high intensity (scale 1-10)
HIGH_INTENSITY_RPE = 8

# Recovery sessions longer than this many minutes are long sessions
LONG_RECOVERY_MINUTES = 60

# Energy density (kcal per gram)
KCAL_PER_GRAM_CARBS = 4.0
KCAL_PER_GRAM_PROTEIN = 4.0
KCAL_PER_GRAM_FAT = 9.0

# Identity of an entity that has not been persisted yet
UNSAVED_ID = 0
