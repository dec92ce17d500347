"""
Sample zone records for demos and tests.

These mirror what the city monitoring feed delivers, including the feed's
own "level" field. Several of those stored levels are stale (e.g. Clock Tower
AQI 98 is tagged "moderate" but classifies as "good"); the registry ignores
them and logs the mismatch.
"""

from typing import Any, Dict, List

DEHRADUN_ZONES: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Clock Tower",
        "coordinates": [30.3165, 78.0322],
        "aqi": 98,
        "level": "moderate",
        "violators": [
            {"type": "vehicle", "name": "Heavy Traffic (350+ vehicles/hr)", "contribution": 55},
            {"type": "construction", "name": "Smart City Development", "contribution": 25},
            {"type": "industry", "name": "Commercial Generators", "contribution": 20},
        ],
    },
    {
        "id": "2",
        "name": "ISBT Dehradun",
        "coordinates": [30.3255, 78.0422],
        "aqi": 156,
        "level": "poor",
        "violators": [
            {"type": "vehicle", "name": "Interstate Bus Terminal", "contribution": 65},
            {"type": "industry", "name": "Diesel Generators", "contribution": 25},
            {"type": "burning", "name": "Waste Burning", "contribution": 10},
        ],
    },
    {
        "id": "3",
        "name": "Forest Research Institute",
        "coordinates": [30.3346, 78.0669],
        "aqi": 42,
        "level": "good",
        "violators": [
            {"type": "vehicle", "name": "Light Traffic", "contribution": 70},
            {"type": "construction", "name": "Maintenance Work", "contribution": 30},
        ],
    },
    {
        "id": "4",
        "name": "Rajpur Road",
        "coordinates": [30.3629, 78.0747],
        "aqi": 124,
        "level": "poor",
        "violators": [
            {"type": "vehicle", "name": "Commercial Vehicles", "contribution": 50},
            {"type": "construction", "name": "Road Widening", "contribution": 35},
            {"type": "industry", "name": "Hotel Generators", "contribution": 15},
        ],
    },
    {
        "id": "5",
        "name": "ONGC Dehradun",
        "coordinates": [30.2679, 78.0599],
        "aqi": 189,
        "level": "poor",
        "violators": [
            {"type": "industry", "name": "Oil & Gas Operations", "contribution": 60},
            {"type": "vehicle", "name": "Industrial Traffic", "contribution": 30},
            {"type": "burning", "name": "Flare Emissions", "contribution": 10},
        ],
    },
]

NEW_DELHI_ZONES: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Connaught Place",
        "coordinates": [28.6315, 77.2167],
        "aqi": 156,
        "level": "poor",
        "violators": [
            {"type": "vehicle", "name": "Heavy Traffic (450+ vehicles/hr)", "contribution": 45},
            {"type": "construction", "name": "Metro Line Construction", "contribution": 35},
            {"type": "industry", "name": "Commercial Generators", "contribution": 20},
        ],
    },
    {
        "id": "2",
        "name": "Anand Vihar",
        "coordinates": [28.6469, 77.3152],
        "aqi": 287,
        "level": "severe",
        "violators": [
            {"type": "industry", "name": "Industrial Cluster", "contribution": 50},
            {"type": "vehicle", "name": "Interstate Bus Terminal", "contribution": 30},
            {"type": "burning", "name": "Waste Burning Sites", "contribution": 20},
        ],
    },
    {
        "id": "3",
        "name": "India Gate",
        "coordinates": [28.6129, 77.2295],
        "aqi": 89,
        "level": "moderate",
        "violators": [
            {"type": "vehicle", "name": "Tourist Traffic", "contribution": 60},
            {"type": "construction", "name": "Road Maintenance", "contribution": 40},
        ],
    },
]

SAMPLE_CITIES: Dict[str, List[Dict[str, Any]]] = {
    "dehradun": DEHRADUN_ZONES,
    "new_delhi": NEW_DELHI_ZONES,
}
