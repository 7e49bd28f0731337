# Human readable labels for well-known Wikidata properties.
# Properties missing here are shown with their raw ID.
PROPERTY_LABELS: dict[str, str] = {
    "P31": "Instance of",
    "P21": "Sex or gender",
    "P27": "Country of citizenship",
    "P106": "Occupation",
    "P569": "Date of birth",
    "P570": "Date of death",
    "P19": "Place of birth",
    "P20": "Place of death",
    "P214": "VIAF ID",
    "P227": "GND ID",
    "P213": "ISNI",
    "P646": "Freebase ID",
    "P18": "Image",
    "P856": "Official website",
    "P1082": "Population",
    "P17": "Country",
    "P131": "Located in",
    "P625": "Coordinate location",
    "P41": "Flag",
    "P373": "Commons category",
    "P1566": "GeoNames ID",
    "P281": "Postal code",
    "P2046": "Area",
    "P30": "Continent",
    "P6": "Head of government",
    "P35": "Head of state",
    "P37": "Official language",
    "P38": "Currency",
    "P47": "Shares border with",
    "P36": "Capital",
    "P1448": "Official name",
    "P571": "Inception",
    "P576": "Dissolution",
    "P580": "Start time",
    "P582": "End time",
    "P2048": "Height",
    "P2049": "Width",
    "P2067": "Mass",
    "P577": "Publication date",
    "P50": "Author",
    "P57": "Director",
    "P58": "Screenwriter",
    "P161": "Cast member",
    "P170": "Creator",
    "P175": "Performer",
    "P495": "Country of origin",
    "P136": "Genre",
    "P144": "Based on",
    "P166": "Award received",
    "P276": "Location",
    "P361": "Part of",
    "P463": "Member of",
    "P527": "Has part",
    "P737": "Influenced by",
    "P800": "Notable work",
    "P1343": "Described by source",
    "P1559": "Name in native language",
    "P2561": "Name",
    "P2572": "Twitter username",
    "P2671": "Google Knowledge Graph ID",
    "P3417": "Quora topic ID",
    "P3984": "Subreddit",
    "P4264": "LinkedIn company ID",
}

# Commonly interesting properties shown in the "basic" section.
# External identifiers never land here, even when listed.
BASIC_PROPERTIES: frozenset[str] = frozenset(
    {
        "P31",
        "P21",
        "P27",
        "P106",
        "P569",
        "P570",
        "P19",
        "P20",
        "P18",
        "P856",
        "P1082",
        "P17",
        "P131",
        "P625",
        "P41",
        "P373",
        "P1566",
        "P281",
        "P2046",
        "P30",
        "P6",
        "P35",
        "P37",
        "P38",
        "P47",
        "P36",
        "P1448",
        "P571",
        "P576",
        "P580",
        "P582",
        "P2048",
        "P2049",
        "P2067",
        "P577",
        "P50",
        "P57",
        "P58",
        "P161",
        "P170",
        "P175",
        "P495",
        "P136",
        "P144",
        "P166",
        "P276",
        "P361",
        "P463",
        "P527",
        "P737",
        "P800",
        "P1343",
        "P1559",
        "P2561",
    }
)


def get_property_label(property_id: str) -> str:
    return PROPERTY_LABELS.get(property_id, property_id)
