# (line, column); lines are 1-based, columns 0-based.
Location = tuple[int, int]
