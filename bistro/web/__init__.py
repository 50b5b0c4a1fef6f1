"""Flask blueprints for the kitchen, floor and finance HTTP routes."""