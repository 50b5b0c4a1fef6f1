"""Kitchen context: dishes, stations and fire orders."""