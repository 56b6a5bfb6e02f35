"""
Result-set statistics (count, average price, categories, price range).
"""
