"""Console application for the personal budget tracker."""
