"""
Vacation recommendation engine.

Responsibilities:
- Load the fixed destination catalog once and keep it immutable.
- Exclude destinations the user has already visited.
- Score remaining destinations against filters and past trips.
- Rank, cap and shape the results, or explain why nothing matched.
- Summarise past trips as a travel-pattern label.
"""
