"""
The MODEL layer contains pure data structures and the curve math.
It has NO knowledge of the demo pipeline or of console output.
"""
