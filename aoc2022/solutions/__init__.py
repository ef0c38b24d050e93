"""Solutions for the individual puzzle days, one module per day."""