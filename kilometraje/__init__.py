"""Travel expense recorder: mileage allowance entries with local persistence."""
