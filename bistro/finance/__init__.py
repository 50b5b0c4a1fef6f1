"""Finance context: cost items, margins, waste records and the food-cost ratio."""