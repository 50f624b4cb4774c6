"""
Engines that overlay, transcribe and translate variant maps.
"""
