"""Step panels rendered inside the wizard host."""
