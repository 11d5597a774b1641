"""Published example IBANs shared by the test suite, one per rule shape."""

VALID_IBANS = {
    "GB": "GB82WEST12345698765432",
    "DE": "DE89370400440532013000",
    "FR": "FR1420041010050500013M02606",
    "IT": "IT60X0542811101000000123456",
    "NL": "NL91ABNA0417164300",
    "NO": "NO9386011117947",
    "BE": "BE68539007547034",
    "CH": "CH9300762011623852957",
    "MT": "MT84MALT011000012345MTLCAST001S",
    "BR": "BR1800360305000010009795493C1",
    "VG": "VG96VPVG0000012345678901",
    # Fixed check digits
    "PT": "PT50000201231234567890154",
    "BA": "BA391290079401028494",
    "ME": "ME25505000012345678951",
    "RS": "RS35260005601001611379",
    "SI": "SI56263300012039086",
    "TN": "TN5910006035183598478831",
    "MK": "MK07250120000058984",
    "MR": "MR1300020001010000123456753",
    "TL": "TL380080012345678910157",
    # Supplementary BBAN checks
    "MU": "MU17BOMM0101101030300200000MUR",
    "SC": "SC18SSCB11010000000000001497USD",
    # Non-standard print groupings
    "BI": "BI4210000100010000332045181",
    "EG": "EG380019000500000000263180002",
    "LY": "LY83002048000020100120361",
    "SV": "SV62CENR00000000000000700025",
    # Unofficial
    "MA": "MA64011519000001205000534921",
    "NE": "NE58NE0380100100130305000268",
    # Aliases
    "IE": "IE29AIBK93115212345678",
    "MC": "MC5811222000010123456789030",
    "SM": "SM86U0322509800000000270100",
    "DJ": "DJ2100010000000154000100186",
    "SN": "SN08SN0100152000048500003035",
}
