"""
Weather query service — indexed lookups over a fixed daily weather dataset.

Usage:
    from weather_api.main import build_planner
    planner = build_planner(Path("seattle-weather.csv"))
    planner.execute(WeatherQuery(weather="snow", limit=5))
"""
