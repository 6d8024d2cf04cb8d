"""
The MODEL layer contains pure data structures and calculator logic.
It has NO knowledge of the GUI (Qt). It deals with operators, number
formatting and the input state machine.
"""
