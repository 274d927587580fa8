"""The scoring model: play codes, advances, pitches, plays, teams and game states."""