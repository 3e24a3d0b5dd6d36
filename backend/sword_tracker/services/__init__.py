# Services package init
"""
Sword Tracker Backend: Services Layer
=====================================

What:  Logic that is neither HTTP handling nor persistence.

Service Inventory:
    - elo_stats:          period windows and rating summaries (pure functions)
    - position_analysis:  PositionAnalyzer interface and the mock analyzer
    - archive_service:    archive lookup and the download landing page
"""
