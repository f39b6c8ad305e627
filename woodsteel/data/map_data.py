"""Static map tables for Wood & Steel.

CITY_TABLE rows: (key, state, latitude, longitude, region, commodities, flags)
ROUTE_TABLE rows: (city, city, mountainous)

Flags are a set drawn from "large", "west_coast", "near_east_coast" and
"near_west_coast". Commodity supply is defined only here; the commodity
table is derived from it at load time.
"""

CITY_TABLE = [
    # Pacific Northwest and western Canada
    ("Vancouver", "BC", 49.28, -123.12, "NW", ["fish", "precious metals", "wood"], {"west_coast"}),
    ("Seattle", "WA", 47.61, -122.33, "NW", ["fish", "wood"], {"west_coast"}),
    ("Portland OR", "OR", 45.52, -122.68, "NW", ["wood"], {"west_coast"}),
    ("Spokane", "WA", 47.66, -117.43, "NW", ["wine"], {"near_west_coast"}),
    ("Boise", "ID", 43.62, -116.20, "NW", ["copper"], {"near_west_coast"}),
    ("Butte", "MT", 46.00, -112.53, "NW", ["coal", "lead", "sheep"], set()),
    ("Billings", "MT", 45.78, -108.50, "NW", [], set()),
    ("Calgary", "AB", 51.05, -114.07, "NW", ["coal", "copper", "lead"], set()),
    ("Edmonton", "AB", 53.55, -113.49, "NW", [], set()),
    ("Regina", "SK", 50.45, -104.61, "NC", ["lead", "nickel"], set()),
    ("Winnipeg", "MB", 49.90, -97.14, "NC", ["cattle", "grain"], set()),
    # California and the desert southwest
    ("Sacramento", "CA", 38.58, -121.49, "SW", [], {"near_west_coast"}),
    ("San Francisco", "CA", 37.77, -122.42, "SW", ["imports", "precious metals", "wine"], {"large", "west_coast"}),
    ("Los Angeles", "CA", 34.05, -118.24, "SW", ["fruit", "imports", "wine"], {"large", "west_coast"}),
    ("San Diego", "CA", 32.72, -117.16, "SW", ["fruit"], {"west_coast"}),
    ("Reno", "NV", 39.53, -119.81, "SW", [], {"near_west_coast"}),
    ("Las Vegas", "NV", 36.17, -115.14, "SW", [], {"near_west_coast"}),
    ("Salt Lake City", "UT", 40.76, -111.89, "SW", ["iron ore", "sheep"], set()),
    ("Phoenix", "AZ", 33.45, -112.07, "SW", ["copper"], {"near_west_coast"}),
    ("Tucson", "AZ", 32.22, -110.97, "SW", [], set()),
    ("Albuquerque", "NM", 35.08, -106.65, "SW", [], set()),
    ("El Paso", "TX", 31.76, -106.49, "SW", [], set()),
    ("Denver", "CO", 39.74, -104.99, "SW", ["lead", "sheep"], set()),
    ("Cheyenne", "WY", 41.14, -104.82, "NW", [], set()),
    # Plains and upper Midwest
    ("Rapid City", "SD", 44.08, -103.23, "NC", [], set()),
    ("Fargo", "ND", 46.88, -96.79, "NC", ["pork"], set()),
    ("Minneapolis", "MN", 44.98, -93.27, "NC", ["grain", "iron ore", "pork"], set()),
    ("Duluth", "MN", 46.79, -92.10, "NC", ["iron ore"], set()),
    ("Thunder Bay", "ON", 48.38, -89.25, "NC", ["cattle", "iron ore"], set()),
    ("Omaha", "NE", 41.26, -95.93, "NC", ["grain"], set()),
    ("Des Moines", "IA", 41.59, -93.62, "NC", ["grain", "pork"], set()),
    ("Kansas City", "MO", 39.10, -94.58, "NC", ["cattle", "grain"], set()),
    ("Milwaukee", "WI", 43.04, -87.91, "NC", ["machinery"], set()),
    ("Chicago", "IL", 41.88, -87.63, "NC", ["coal", "machinery", "tourists"], {"large"}),
    ("St. Louis", "MO", 38.63, -90.20, "NC", [], {"large"}),
    # South central
    ("Oklahoma City", "OK", 35.47, -97.52, "SC", ["oil"], set()),
    ("Dallas", "TX", 32.78, -96.80, "SC", ["cotton", "oil"], set()),
    ("Houston", "TX", 29.76, -95.37, "SC", ["oil", "rice"], set()),
    ("San Antonio", "TX", 29.42, -98.49, "SC", [], set()),
    ("Little Rock", "AR", 34.75, -92.29, "SC", [], set()),
    ("Memphis", "TN", 35.15, -90.05, "SC", ["bauxite"], set()),
    ("New Orleans", "LA", 29.95, -90.07, "SC", ["fish", "rice"], set()),
    # Ohio valley and Great Lakes
    ("Detroit", "MI", 42.33, -83.05, "NE", ["machinery"], {"large"}),
    ("Indianapolis", "IN", 39.77, -86.16, "NE", [], set()),
    ("Cincinnati", "OH", 39.10, -84.51, "NE", ["coal"], set()),
    ("Louisville", "KY", 38.25, -85.76, "NE", [], set()),
    ("Cleveland", "OH", 41.50, -81.69, "NE", [], set()),
    ("Pittsburgh", "PA", 40.44, -79.99, "NE", ["coal", "steel"], set()),
    ("Buffalo", "NY", 42.89, -78.88, "NE", [], set()),
    ("Toronto", "ON", 43.65, -79.38, "NE", ["machinery"], {"large"}),
    ("Sudbury", "ON", 46.49, -80.99, "NE", ["nickel"], set()),
    ("Ottawa", "ON", 45.42, -75.70, "NE", ["wood"], set()),
    ("Syracuse", "NY", 43.05, -76.15, "NE", ["machinery"], set()),
    # Atlantic seaboard
    ("Montreal", "QC", 45.50, -73.57, "NE", [], {"large", "near_east_coast"}),
    ("Quebec City", "QC", 46.81, -71.21, "NE", ["imports", "wood"], {"near_east_coast"}),
    ("Portland ME", "ME", 43.66, -70.26, "NE", ["aluminum", "wood"], {"near_east_coast"}),
    ("Boston", "MA", 42.36, -71.06, "NE", ["imports", "machinery"], {"large", "near_east_coast"}),
    ("Albany", "NY", 42.65, -73.75, "NE", [], {"near_east_coast"}),
    ("New York", "NY", 40.71, -74.01, "NE", ["imports", "tourists"], {"large", "near_east_coast"}),
    ("Philadelphia", "PA", 39.95, -75.17, "NE", ["imports", "tourists"], {"large", "near_east_coast"}),
    ("Washington", "DC", 38.91, -77.04, "NE", [], {"near_east_coast"}),
    # Southeast
    ("Norfolk", "VA", 36.85, -76.29, "SE", ["tobacco"], {"near_east_coast"}),
    ("Raleigh", "NC", 35.78, -78.64, "SE", ["textiles", "tobacco"], {"near_east_coast"}),
    ("Charleston", "SC", 32.78, -79.93, "SE", ["cotton", "tobacco"], {"near_east_coast"}),
    ("Savannah", "GA", 32.08, -81.09, "SE", ["textiles"], {"near_east_coast"}),
    ("Nashville", "TN", 36.16, -86.78, "SE", [], set()),
    ("Birmingham", "AL", 33.52, -86.80, "SE", ["steel"], set()),
    ("Atlanta", "GA", 33.75, -84.39, "SE", ["coal", "cotton", "textiles"], set()),
    ("Mobile", "AL", 30.69, -88.04, "SE", [], set()),
    ("Tallahassee", "FL", 30.44, -84.28, "SE", ["textiles"], set()),
    ("Jacksonville", "FL", 30.33, -81.66, "SE", [], {"near_east_coast"}),
    ("Tampa", "FL", 27.95, -82.46, "SE", ["fruit"], set()),
    ("Miami", "FL", 25.76, -80.19, "SE", [], {"near_east_coast"}),
]

ROUTE_TABLE = [
    # West
    ("Vancouver", "Seattle", False),
    ("Vancouver", "Calgary", True),
    ("Vancouver", "Spokane", True),
    ("Seattle", "Portland OR", False),
    ("Seattle", "Spokane", True),
    ("Portland OR", "Boise", True),
    ("Portland OR", "Sacramento", True),
    ("Spokane", "Butte", True),
    ("Spokane", "Boise", False),
    ("Spokane", "Calgary", True),
    ("Calgary", "Edmonton", False),
    ("Calgary", "Regina", False),
    ("Edmonton", "Regina", False),
    ("Calgary", "Butte", True),
    ("Boise", "Salt Lake City", False),
    ("Boise", "Butte", True),
    ("Butte", "Billings", False),
    ("Butte", "Salt Lake City", True),
    ("Billings", "Regina", False),
    ("Billings", "Rapid City", False),
    ("Billings", "Cheyenne", False),
    ("Regina", "Winnipeg", False),
    ("Winnipeg", "Fargo", False),
    ("Winnipeg", "Thunder Bay", False),
    ("Sacramento", "San Francisco", False),
    ("Sacramento", "Reno", True),
    ("San Francisco", "Los Angeles", False),
    ("Reno", "Salt Lake City", False),
    ("Reno", "Las Vegas", False),
    ("Los Angeles", "San Diego", False),
    ("Los Angeles", "Las Vegas", False),
    ("San Diego", "Phoenix", False),
    ("Las Vegas", "Salt Lake City", False),
    ("Las Vegas", "Phoenix", False),
    ("Phoenix", "Tucson", False),
    ("Tucson", "El Paso", False),
    ("Phoenix", "Albuquerque", True),
    ("Salt Lake City", "Cheyenne", True),
    ("Salt Lake City", "Denver", True),
    ("Albuquerque", "Denver", True),
    ("Albuquerque", "El Paso", False),
    ("Albuquerque", "Oklahoma City", False),
    ("El Paso", "San Antonio", False),
    ("Denver", "Cheyenne", False),
    ("Denver", "Kansas City", False),
    ("Denver", "Oklahoma City", False),
    # Plains and Midwest
    ("Cheyenne", "Omaha", False),
    ("Cheyenne", "Rapid City", False),
    ("Rapid City", "Fargo", False),
    ("Rapid City", "Omaha", False),
    ("Fargo", "Minneapolis", False),
    ("Fargo", "Duluth", False),
    ("Minneapolis", "Duluth", False),
    ("Duluth", "Thunder Bay", False),
    ("Thunder Bay", "Sudbury", False),
    ("Minneapolis", "Des Moines", False),
    ("Minneapolis", "Milwaukee", False),
    ("Omaha", "Des Moines", False),
    ("Omaha", "Kansas City", False),
    ("Des Moines", "Chicago", False),
    ("Des Moines", "Kansas City", False),
    ("Kansas City", "St. Louis", False),
    ("Kansas City", "Oklahoma City", False),
    ("Chicago", "Milwaukee", False),
    ("Chicago", "St. Louis", False),
    ("Chicago", "Detroit", False),
    ("Chicago", "Indianapolis", False),
    # South central
    ("Oklahoma City", "Dallas", False),
    ("Oklahoma City", "Little Rock", False),
    ("Dallas", "Houston", False),
    ("Dallas", "San Antonio", False),
    ("Dallas", "Little Rock", False),
    ("San Antonio", "Houston", False),
    ("Houston", "New Orleans", False),
    ("Little Rock", "Memphis", False),
    ("Little Rock", "St. Louis", False),
    ("Memphis", "St. Louis", False),
    ("Memphis", "Nashville", False),
    ("Memphis", "Birmingham", False),
    ("Memphis", "New Orleans", False),
    ("New Orleans", "Mobile", False),
    # Ohio valley and Great Lakes
    ("St. Louis", "Indianapolis", False),
    ("St. Louis", "Louisville", False),
    ("Detroit", "Toronto", False),
    ("Detroit", "Cleveland", False),
    ("Indianapolis", "Cincinnati", False),
    ("Indianapolis", "Louisville", False),
    ("Louisville", "Cincinnati", False),
    ("Louisville", "Nashville", False),
    ("Cincinnati", "Pittsburgh", True),
    ("Cincinnati", "Cleveland", False),
    ("Cleveland", "Pittsburgh", False),
    ("Cleveland", "Buffalo", False),
    ("Pittsburgh", "Buffalo", False),
    ("Buffalo", "Toronto", False),
    ("Buffalo", "Syracuse", False),
    ("Toronto", "Sudbury", False),
    ("Toronto", "Ottawa", False),
    ("Sudbury", "Ottawa", False),
    # Southeast
    ("Mobile", "Birmingham", False),
    ("Mobile", "Tallahassee", False),
    ("Nashville", "Birmingham", False),
    ("Nashville", "Atlanta", True),
    ("Birmingham", "Atlanta", False),
    ("Atlanta", "Savannah", False),
    ("Atlanta", "Tallahassee", False),
    ("Atlanta", "Charleston", False),
    ("Tallahassee", "Jacksonville", False),
    ("Jacksonville", "Savannah", False),
    ("Jacksonville", "Tampa", False),
    ("Jacksonville", "Miami", False),
    ("Tampa", "Miami", False),
    # Atlantic seaboard
    ("Savannah", "Charleston", False),
    ("Charleston", "Raleigh", False),
    ("Raleigh", "Norfolk", False),
    ("Raleigh", "Washington", False),
    ("Norfolk", "Washington", False),
    ("Washington", "Philadelphia", False),
    ("Washington", "Pittsburgh", True),
    ("Pittsburgh", "Philadelphia", True),
    ("Ottawa", "Montreal", False),
    ("Montreal", "Quebec City", False),
    ("Montreal", "Albany", True),
    ("Quebec City", "Portland ME", True),
    ("Portland ME", "Boston", False),
    ("Boston", "Albany", True),
    ("Boston", "New York", False),
    ("Albany", "Syracuse", False),
    ("Albany", "New York", False),
    ("New York", "Philadelphia", False),
]

# Cities players are likely to start from; independent railroads are seeded
# away from them.
LIKELY_STARTING_CITIES = [
    "Quebec City",
    "Montreal",
    "Boston",
    "Portland ME",
    "Philadelphia",
    "New York",
    "Washington",
    "Norfolk",
    "Raleigh",
    "Charleston",
    "Savannah",
]
