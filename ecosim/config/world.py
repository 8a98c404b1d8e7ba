"""World layout configuration constants."""

# Population sizes
ANIMAL_COUNT = 40  # Animals alive in every generation
FOOD_COUNT = 60  # Food items scattered over the world

# An animal eats food whose centre is at most this far away (world units, world is 1x1)
EAT_DISTANCE = 0.01
