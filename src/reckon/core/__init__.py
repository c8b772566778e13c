"""
reckon core: errors, configuration, IR, and the arithmetic pipeline.
"""
