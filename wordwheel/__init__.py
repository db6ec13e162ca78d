"""WordWheel - a terminal phrase-guessing game."""
