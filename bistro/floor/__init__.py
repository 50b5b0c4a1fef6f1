"""Floor context: tables, seatings, menu items and covers."""