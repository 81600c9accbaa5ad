from .character_counter import CharacterCounter

counter = CharacterCounter()
