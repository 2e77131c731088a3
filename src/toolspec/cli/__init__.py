"""toolspec command line interface."""
