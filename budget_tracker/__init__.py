"""Project financial summary aggregation for the budget tracker."""
