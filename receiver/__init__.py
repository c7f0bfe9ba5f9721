"""Half-Wit receiver: the shared big-screen display of a Half-Wit game."""
