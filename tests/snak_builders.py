def make_snak(datatype: str, value, property_id: str = "P1", snaktype: str = "value") -> dict:
    """Build a value snak the way Special:EntityData serializes it"""
    return {
        "snaktype": snaktype,
        "property": property_id,
        "datatype": datatype,
        "datavalue": {"value": value, "type": datatype},
    }


def make_claim(snak: dict) -> dict:
    return {"mainsnak": snak, "type": "statement", "rank": "normal"}
