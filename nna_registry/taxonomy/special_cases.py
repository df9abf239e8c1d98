"""
Special-case HFN <-> MFA overrides.

Entries here win over the reference table in both directions. They pin
addresses that positional-index lookups used to compute differently
(S.POP.HPM came out as 2.004.003); keeping them explicit means a data
edit can never silently move assets already registered under them.

Key:   "{LAYER}.{CATEGORY}.{SUBCATEGORY}"
Value: "{LAYER#}.{CATEGORY#}.{SUBCATEGORY#}"
"""

SPECIAL_CASE_MAPPINGS: dict[str, str] = {
    "S.POP.HPM": "2.001.007",  # Pop / Pop_Hipster_Male_Stars
    "W.BCH.SUN": "5.004.003",  # Beach / Sunset (shares 003 with BCH.FES)
}
