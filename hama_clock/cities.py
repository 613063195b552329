from collections import namedtuple

City = namedtuple("City", ["code", "tz", "name", "country"])

CITIES = (
    City("TYO", "Asia/Tokyo", "Tokyo", "Japan"),
    City("NYC", "America/New_York", "New York", "USA"),
    City("LON", "Europe/London", "London", "UK"),
    City("PAR", "Europe/Paris", "Paris", "France"),
    City("HKG", "Asia/Hong_Kong", "Hong Kong", "China"),
    City("LAX", "America/Los_Angeles", "Los Angeles", "USA"),
    City("SFO", "America/Los_Angeles", "San Francisco", "USA"),
    City("CHI", "America/Chicago", "Chicago", "USA"),
    City("HNL", "Pacific/Honolulu", "Honolulu", "USA"),
    City("YVR", "America/Vancouver", "Vancouver", "Canada"),
    City("YYZ", "America/Toronto", "Toronto", "Canada"),
    City("SAO", "America/Sao_Paulo", "São Paulo", "Brazil"),
    City("BER", "Europe/Berlin", "Berlin", "Germany"),
    City("IST", "Europe/Istanbul", "Istanbul", "Turkey"),
    City("DXB", "Asia/Dubai", "Dubai", "UAE"),
    City("BOM", "Asia/Kolkata", "Mumbai", "India"),
    City("DEL", "Asia/Kolkata", "New Delhi", "India"),
    City("BKK", "Asia/Bangkok", "Bangkok", "Thailand"),
    City("SIN", "Asia/Singapore", "Singapore", "Singapore"),
    City("SEL", "Asia/Seoul", "Seoul", "South Korea"),
    City("PEK", "Asia/Shanghai", "Beijing", "China"),
    City("TPE", "Asia/Taipei", "Taipei", "Taiwan"),
    City("SYD", "Australia/Sydney", "Sydney", "Australia"),
    City("AKL", "Pacific/Auckland", "Auckland", "New Zealand"),
    City("UTC", "UTC", "UTC", "World"),
)

_BY_CODE = {city.code: city for city in CITIES}


def find_city(code):
    return _BY_CODE.get(code)


def sorted_cities():
    """Catalog ordered by country, then city name."""
    return sorted(CITIES, key=lambda c: (c.country.casefold(), c.name.casefold()))


def city_label(city):
    # e.g. "Tokyo, Japan (TYO)"
    return f"{city.name}, {city.country} ({city.code})"
