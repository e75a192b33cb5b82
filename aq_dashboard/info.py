#file: aq_dashboard/info.py

from typing import Dict, List

from aq_dashboard.breakpoints import CATEGORIES
from aq_dashboard.classifier import health_advice


def info_sections(city: str, contact_email: str) -> Dict[str, List[str]]:
    """Static portal pages as titled lists of markdown paragraphs, in display order."""
    return {
        "Health advisory" : [f"Health recommendations based on the current air quality level in {city}."]
                            + [f"**{label}:** {health_advice(label)}" for label in CATEGORIES],
        "Methodology" : [
            "📍 Sensor data collection every 5 minutes.",
            "🧮 Data validation using statistical and spatial algorithms.",
            "📊 Averaging and trend calculation using Python (Pandas).",
            "🎨 Health categories follow the EPA breakpoints for AQI, PM2.5 and PM10; "
            "a value on a breakpoint belongs to the lower category.",
            "🔐 Quality control performed by the County's Environmental Department.",
        ],
        "Education" : [
            "🌍 Classroom guides on the science of air pollution.",
            "🚶 How to reduce your exposure on high-pollution days.",
            "📱 How to interpret air quality data from this portal.",
        ],
        "Research" : [
            f"**Urban Air Quality Assessment (2024):** spatial survey of pollution across {city}.",
            f"**Health Impacts of PM2.5 in {city} (2023):** links between fine particulates and respiratory illness.",
            "**Community-Led Monitoring (2022):** low-cost sensors operated by residents.",
        ],
        "Terms of use" : [
            f"By using the {city} Air Quality Portal you accept these terms.",
            "The portal provides air quality information for public awareness; it is not medical advice.",
            "Do not manipulate or misrepresent the data presented.",
            "Do not attempt unauthorized access to the system or APIs.",
            f"Always cite the {city} Air Quality Portal as the data source when using its data.",
            f"Questions: {contact_email}",
        ],
    }
