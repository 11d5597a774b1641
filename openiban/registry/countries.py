"""IBAN rule table for every country the registry knows about.

Sources: Wikipedia's IBAN article (which names the parts of each BBAN) and the
SWIFT IBAN Registry. Entries with ``official=False`` are territories that use
the IBAN format without being listed in the registry.

Field offsets are positions in the full IBAN string. Alias entries reuse the
structure of another country and override only the name and official flag;
see ``registry.build_registry`` for how they are materialized.
"""

from ..domain.enums import CharClass
from ..domain.value_objects import MOD97, CheckDigitPolicy, CountryRule, FieldSpec
from .checks import bank_code_letters_then_digits

N = CharClass.NUMERIC
A = CharClass.ALPHABETIC
C = CharClass.ALPHANUMERIC
Z = CharClass.ZERO_FILLED

COUNTRY_TABLE: dict[str, CountryRule] = {
    "AD": CountryRule(
        "Andorra",
        official=True,
        expected_length=24,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, N, "National bank code"),
            FieldSpec(8, 4, N, "Branch code"),
            FieldSpec(12, 12, C, "Account number"),
        ),
    ),
    "AE": CountryRule(
        "United Arab Emirates",
        official=True,
        expected_length=23,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 16, N, "Account number"),
        ),
    ),
    "AL": CountryRule(
        "Albania",
        official=True,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 4, N, "Branch code"),
            FieldSpec(11, 1, N, "National check digit"),
            FieldSpec(12, 16, C, "Account number"),
        ),
    ),
    "AO": CountryRule(
        "Angola",
        official=False,
        expected_length=25,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 21, N),
        ),
    ),
    "AT": CountryRule(
        "Austria",
        official=True,
        expected_length=20,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 5, N, "National bank code"),
            FieldSpec(9, 11, N, "Account number"),
        ),
    ),
    "AZ": CountryRule(
        "Azerbaijan",
        official=True,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "National bank code"),
            FieldSpec(8, 20, C, "Account number"),
        ),
    ),
    "BA": CountryRule(
        "Bosnia and Herzegovina",
        official=True,
        expected_length=20,
        check_digits=CheckDigitPolicy.fixed(39),
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 3, N, "Branch code"),
            FieldSpec(10, 8, N, "Account number"),
            FieldSpec(18, 2, N, "National check digits"),
        ),
    ),
    "BE": CountryRule(
        "Belgium",
        official=True,
        expected_length=16,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 7, N, "Account number"),
            FieldSpec(14, 2, N, "National check digits"),
        ),
    ),
    "BF": CountryRule("Burkina Faso", official=False, alias_of="BJ"),
    "BG": CountryRule(
        "Bulgaria",
        official=True,
        expected_length=22,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "BIC bank code"),
            FieldSpec(8, 4, N, "Branch (BAE) number"),
            FieldSpec(12, 2, N, "Account type"),
            FieldSpec(14, 8, C, "Account number"),
        ),
    ),
    "BH": CountryRule(
        "Bahrain",
        official=True,
        expected_length=22,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "National bank code"),
            FieldSpec(8, 14, C, "Account number"),
        ),
    ),
    "BI": CountryRule(
        "Burundi",
        official=True,
        expected_length=27,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 5, N, "National bank code"),
            FieldSpec(9, 5, N, "Branch identifier"),
            FieldSpec(14, 11, N, "Account number"),
            FieldSpec(25, 2, N, "National check digits"),
        ),
    ),
    "BJ": CountryRule(
        "Benin",
        official=False,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 2, C),
            FieldSpec(6, 22, N),
        ),
    ),
    "BR": CountryRule(
        "Brazil",
        official=True,
        expected_length=29,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 8, N, "National bank code"),
            FieldSpec(12, 5, N, "Branch code"),
            FieldSpec(17, 10, N, "Account number"),
            FieldSpec(27, 1, A, "Account type"),
            FieldSpec(28, 1, C, "Owner account number"),
        ),
    ),
    "BY": CountryRule(
        "Belarus",
        official=True,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, C, "National bank or branch code"),
            FieldSpec(8, 4, N, "Balance account number"),
            FieldSpec(12, 16, C, "Account number"),
        ),
    ),
    "CF": CountryRule("Central African Republic", official=False, alias_of="BI"),
    "CG": CountryRule("Republic of the Congo", official=False, alias_of="BI"),
    "CH": CountryRule(
        "Switzerland",
        official=True,
        expected_length=21,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 5, N, "National bank code"),
            FieldSpec(9, 12, C, "Code identifying a bank account"),
        ),
    ),
    "CI": CountryRule(
        "Côte d’Ivoire",
        official=False,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 2, A),
            FieldSpec(6, 22, N),
        ),
    ),
    "CM": CountryRule("Cameroon", official=False, alias_of="BI"),
    "CR": CountryRule(
        "Costa Rica",
        official=True,
        expected_length=22,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 1, Z),
            FieldSpec(5, 3, N, "Bank code"),
            FieldSpec(8, 14, N, "Account number"),
        ),
    ),
    "CV": CountryRule("Cabo Verde", official=False, alias_of="AO"),
    "CY": CountryRule(
        "Cyprus",
        official=True,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 5, N, "Branch code"),
            FieldSpec(12, 16, C, "Account number"),
        ),
    ),
    "CZ": CountryRule(
        "Czech Republic",
        official=True,
        expected_length=24,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, N, "National bank code"),
            FieldSpec(8, 4, N, "Account number prefix"),
            FieldSpec(12, 2, N),
            FieldSpec(14, 10, N, "Account number"),
        ),
    ),
    "DE": CountryRule(
        "Germany",
        official=True,
        expected_length=22,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 8, N, "Bank and branch identifier (Bankleitzahl/BLZ)"),
            FieldSpec(12, 10, N, "Account number"),
        ),
    ),
    "DJ": CountryRule("Djibouti", official=True, alias_of="BI"),
    "DK": CountryRule(
        "Denmark",
        official=True,
        expected_length=18,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, N, "National bank code"),
            FieldSpec(8, 9, N, "Account number"),
            FieldSpec(17, 1, N, "National check digit"),
        ),
    ),
    "DO": CountryRule(
        "Dominican Republic",
        official=True,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, C, "Bank identifier"),
            FieldSpec(8, 20, N, "Account number"),
        ),
    ),
    "DZ": CountryRule(
        "Algeria",
        official=False,
        expected_length=26,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 22, N),
        ),
    ),
    "EE": CountryRule(
        "Estonia",
        official=True,
        expected_length=20,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 2, N, "National bank code"),
            FieldSpec(6, 2, N, "Branch code"),
            FieldSpec(8, 11, N, "Account number"),
            FieldSpec(19, 1, N, "National check digit"),
        ),
    ),
    "EG": CountryRule(
        "Egypt",
        official=True,
        expected_length=29,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, N, "National bank code"),
            FieldSpec(8, 4, N, "Branch code"),
            FieldSpec(12, 17, N, "Account number"),
        ),
    ),
    "ES": CountryRule(
        "Spain",
        official=True,
        expected_length=24,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, N, "National bank code"),
            FieldSpec(8, 4, N, "Branch code"),
            FieldSpec(12, 2, N, "National check digits"),
            FieldSpec(14, 10, N, "Account number"),
        ),
    ),
    "FI": CountryRule(
        "Finland",
        official=True,
        expected_length=18,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 6, N, "Bank and branch code"),
            FieldSpec(10, 7, N, "Account number"),
            FieldSpec(17, 1, N, "National check digit"),
        ),
    ),
    "FK": CountryRule(
        "Falkland Islands",
        official=True,
        expected_length=18,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 2, A, "National bank code"),
            FieldSpec(6, 12, N, "Account number"),
        ),
    ),
    "FO": CountryRule("Faroe Islands", official=True, alias_of="DK"),
    "FR": CountryRule(
        "France",
        official=True,
        expected_length=27,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 5, N, "National bank code"),
            FieldSpec(9, 5, N, "Branch code (code guichet)"),
            FieldSpec(14, 11, C, "Account number"),
            FieldSpec(25, 2, N, "National check digits (clé RIB)"),
        ),
    ),
    "GA": CountryRule("Gabon", official=False, alias_of="BI"),
    "GB": CountryRule(
        "United Kingdom",
        official=True,
        expected_length=22,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "BIC bank code"),
            FieldSpec(8, 6, N, "Bank and branch code (sort code)"),
            FieldSpec(14, 8, N, "Account number"),
        ),
    ),
    "GE": CountryRule(
        "Georgia",
        official=True,
        expected_length=22,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 2, A, "National bank code"),
            FieldSpec(6, 16, N, "Account number"),
        ),
    ),
    "GI": CountryRule(
        "Gibraltar",
        official=True,
        expected_length=23,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "BIC bank code"),
            FieldSpec(8, 15, C, "Account number"),
        ),
    ),
    "GL": CountryRule("Greenland", official=True, alias_of="DK"),
    "GQ": CountryRule("Equatorial Guinea", official=False, alias_of="BI"),
    "GR": CountryRule(
        "Greece",
        official=True,
        expected_length=27,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 4, N, "Branch code"),
            FieldSpec(11, 16, C, "Account number"),
        ),
    ),
    "GT": CountryRule(
        "Guatemala",
        official=True,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, C, "National bank code"),
            FieldSpec(8, 2, C, "Currency code"),
            FieldSpec(10, 2, C, "Account type"),
            FieldSpec(12, 16, C, "Account number"),
        ),
    ),
    "GW": CountryRule(
        "Guinea-Bissau",
        official=False,
        expected_length=25,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 2, C),
            FieldSpec(6, 19, N),
        ),
    ),
    "HN": CountryRule(
        "Honduras",
        official=True,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A),
            FieldSpec(8, 20, N),
        ),
    ),
    "HR": CountryRule(
        "Croatia",
        official=True,
        expected_length=21,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 7, N, "Bank code"),
            FieldSpec(11, 10, N, "Account number"),
        ),
    ),
    "HU": CountryRule(
        "Hungary",
        official=True,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 4, N, "Branch code"),
            FieldSpec(11, 1, N, "National check digit 1"),
            FieldSpec(12, 15, N, "Account number"),
            FieldSpec(27, 1, N, "National check digit 2"),
        ),
    ),
    "IE": CountryRule("Ireland", official=True, alias_of="GB"),
    "IL": CountryRule(
        "Israel",
        official=True,
        expected_length=23,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 3, N, "Branch code"),
            FieldSpec(10, 13, N, "Account number"),
        ),
    ),
    "IQ": CountryRule(
        "Iraq",
        official=True,
        expected_length=23,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "National bank code"),
            FieldSpec(8, 3, N, "Branch code"),
            FieldSpec(11, 12, N, "Account number"),
        ),
    ),
    "IR": CountryRule("Iran", official=False, alias_of="DZ"),
    "IS": CountryRule(
        "Iceland",
        official=True,
        expected_length=26,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 2, N, "National bank code"),
            FieldSpec(6, 2, N, "Branch code"),
            FieldSpec(8, 2, N, "Account type"),
            FieldSpec(10, 6, N, "Account number"),
            FieldSpec(16, 10, N, "Account holder’s kennitala (national ID number)"),
        ),
    ),
    "IT": CountryRule(
        "Italy",
        official=True,
        expected_length=27,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 1, A, "Check character (CIN)"),
            FieldSpec(5, 5, N, "National bank code (Associazione Bancaria Italiana/Codice ABI)"),
            FieldSpec(
                10,
                5,
                N,
                "Branch code (Coordinate bancarie/Codice d’Avviamento Bancario (CAB))",
            ),
            FieldSpec(15, 12, C, "Account number"),
        ),
    ),
    "JO": CountryRule(
        "Jordan",
        official=True,
        expected_length=30,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "National bank code"),
            FieldSpec(8, 4, N, "Branch code"),
            FieldSpec(12, 18, C, "Account number"),
        ),
    ),
    "KM": CountryRule("Comoros", official=False, alias_of="BI"),
    "KW": CountryRule(
        "Kuwait",
        official=True,
        expected_length=30,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "National bank code"),
            FieldSpec(8, 22, C, "Account number"),
        ),
    ),
    "KZ": CountryRule(
        "Kazakhstan",
        official=True,
        expected_length=20,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 13, C, "Account number"),
        ),
    ),
    "LB": CountryRule(
        "Lebanon",
        official=True,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, N, "National bank code"),
            FieldSpec(8, 20, C, "Account number"),
        ),
    ),
    "LC": CountryRule(
        "Saint Lucia",
        official=True,
        expected_length=32,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "Bank code"),
            FieldSpec(8, 24, C, "Account number"),
        ),
    ),
    "LI": CountryRule(
        "Liechtenstein",
        official=True,
        expected_length=21,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 5, N, "National bank code"),
            FieldSpec(9, 12, C, "Account number"),
        ),
    ),
    "LT": CountryRule(
        "Lithuania",
        official=True,
        expected_length=20,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 5, N, "National bank code"),
            FieldSpec(9, 11, C, "Account number"),
        ),
    ),
    "LU": CountryRule(
        "Luxembourg",
        official=True,
        expected_length=20,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 13, C, "Account number"),
        ),
    ),
    "LV": CountryRule(
        "Latvia",
        official=True,
        expected_length=21,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "BIC bank code"),
            FieldSpec(8, 13, C, "Account number"),
        ),
    ),
    "LY": CountryRule(
        "Libya",
        official=True,
        expected_length=25,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 3, N, "Branch code"),
            FieldSpec(10, 15, N, "Account number"),
        ),
    ),
    "MA": CountryRule(
        "Morocco",
        official=False,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 24, N),
        ),
    ),
    "MC": CountryRule("Monaco", official=True, alias_of="FR"),
    "MD": CountryRule(
        "Moldova",
        official=True,
        expected_length=24,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 2, C, "National bank code"),
            FieldSpec(6, 18, C, "Account code"),
        ),
    ),
    "ME": CountryRule(
        "Montenegro",
        official=True,
        expected_length=22,
        check_digits=CheckDigitPolicy.fixed(25),
        fields=(
            FieldSpec(4, 3, N, "Bank code"),
            FieldSpec(7, 13, N, "Account number"),
            FieldSpec(20, 2, N, "National check digits"),
        ),
    ),
    "MG": CountryRule("Madagascar", official=False, alias_of="BI"),
    "MK": CountryRule(
        "North Macedonia",
        official=True,
        expected_length=19,
        check_digits=CheckDigitPolicy.fixed(7),
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 10, N, "Account number"),
            FieldSpec(17, 2, N, "National check digits"),
        ),
    ),
    "ML": CountryRule("Mali", official=False, alias_of="BJ"),
    "MN": CountryRule(
        "Mongolia",
        official=True,
        expected_length=20,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, N, "National bank code"),
            FieldSpec(8, 12, N, "Account number"),
        ),
    ),
    "MR": CountryRule(
        "Mauritania",
        official=True,
        expected_length=27,
        check_digits=CheckDigitPolicy.fixed(13),
        fields=(
            FieldSpec(4, 5, N, "National bank code"),
            FieldSpec(9, 5, N, "Branch code (code guichet)"),
            FieldSpec(14, 11, N, "Account number"),
            FieldSpec(25, 2, N, "National check digits"),
        ),
    ),
    "MT": CountryRule(
        "Malta",
        official=True,
        expected_length=31,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "BIC bank code"),
            FieldSpec(8, 5, N, "Branch code"),
            FieldSpec(13, 18, C, "Account number"),
        ),
    ),
    "MU": CountryRule(
        "Mauritius",
        official=True,
        expected_length=30,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 6, C, "National bank code"),
            FieldSpec(10, 2, N, "Branch identifier"),
            FieldSpec(12, 12, N, "Account number"),
            FieldSpec(24, 3, Z),
            FieldSpec(27, 3, A, "Currency code"),
        ),
        supplementary_checks=(bank_code_letters_then_digits,),
    ),
    "MZ": CountryRule("Mozambique", official=False, alias_of="AO"),
    "NE": CountryRule(
        "Niger",
        official=False,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 2, A),
            FieldSpec(6, 22, N),
        ),
    ),
    "NI": CountryRule(
        "Nicaragua",
        official=True,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "National bank code"),
            FieldSpec(8, 20, N, "Account number"),
        ),
    ),
    "NL": CountryRule(
        "The Netherlands",
        official=True,
        expected_length=18,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "BIC bank code"),
            FieldSpec(8, 10, N, "Account number"),
        ),
    ),
    "NO": CountryRule(
        "Norway",
        official=True,
        expected_length=15,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, N, "National bank code"),
            FieldSpec(8, 6, N, "Account number"),
            FieldSpec(14, 1, N, "National check digit"),
        ),
    ),
    "OM": CountryRule(
        "Oman",
        official=True,
        expected_length=23,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 16, C, "Account number"),
        ),
    ),
    "PK": CountryRule(
        "Pakistan",
        official=True,
        expected_length=24,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "National bank code"),
            FieldSpec(8, 16, C, "Account number"),
        ),
    ),
    "PL": CountryRule(
        "Poland",
        official=True,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 4, N, "Branch code"),
            FieldSpec(11, 1, N, "National check digit"),
            FieldSpec(12, 16, N, "Account number"),
        ),
    ),
    "PS": CountryRule(
        "Palestine",
        official=True,
        expected_length=29,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "National bank code"),
            FieldSpec(8, 21, C, "Account number"),
        ),
    ),
    "PT": CountryRule(
        "Portugal",
        official=True,
        expected_length=25,
        check_digits=CheckDigitPolicy.fixed(50),
        fields=(
            FieldSpec(4, 4, N, "National bank code"),
            FieldSpec(8, 4, N, "Branch code"),
            FieldSpec(12, 11, N, "Account number"),
            FieldSpec(23, 2, N, "National check digits"),
        ),
    ),
    "QA": CountryRule(
        "Qatar",
        official=True,
        expected_length=29,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "National bank code"),
            FieldSpec(8, 21, C, "Account number"),
        ),
    ),
    "RO": CountryRule(
        "Romania",
        official=True,
        expected_length=24,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "BIC bank code"),
            FieldSpec(8, 16, C, "Branch code and account number"),
        ),
    ),
    "RS": CountryRule(
        "Serbia",
        official=True,
        expected_length=22,
        check_digits=CheckDigitPolicy.fixed(35),
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 13, N, "Account number"),
            FieldSpec(20, 2, N, "Account check digits"),
        ),
    ),
    "RU": CountryRule(
        "Russia",
        official=True,
        expected_length=33,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 9, N, "Bank code"),
            FieldSpec(13, 5, N, "Branch code"),
            FieldSpec(18, 15, C, "Account number"),
        ),
    ),
    "SA": CountryRule(
        "Saudi Arabia",
        official=True,
        expected_length=24,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 2, N, "National bank code"),
            FieldSpec(6, 18, C, "Account number"),
        ),
    ),
    "SC": CountryRule(
        "Seychelles",
        official=True,
        expected_length=31,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 6, C, "Bank code"),
            FieldSpec(10, 2, N, "Branch code"),
            FieldSpec(12, 16, N, "Account number"),
            FieldSpec(28, 3, A, "Currency code"),
        ),
        supplementary_checks=(bank_code_letters_then_digits,),
    ),
    "SD": CountryRule(
        "Sudan",
        official=True,
        expected_length=18,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 2, N, "National bank code"),
            FieldSpec(6, 12, N, "Account number"),
        ),
    ),
    "SE": CountryRule(
        "Sweden",
        official=True,
        expected_length=24,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 16, N, "Account number"),
            FieldSpec(23, 1, N, "Check digit"),
        ),
    ),
    "SI": CountryRule(
        "Slovenia",
        official=True,
        expected_length=19,
        check_digits=CheckDigitPolicy.fixed(56),
        fields=(
            FieldSpec(4, 2, N, "National bank code"),
            FieldSpec(6, 3, N, "Branch code"),
            FieldSpec(9, 8, N, "Account number"),
            FieldSpec(17, 2, N, "National check digits"),
        ),
    ),
    "SK": CountryRule(
        "Slovakia",
        official=True,
        expected_length=24,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, N, "National bank code"),
            FieldSpec(8, 4, N, "Account number prefix"),
            FieldSpec(12, 2, N),
            FieldSpec(14, 10, N, "Account number"),
        ),
    ),
    "SM": CountryRule("San Marino", official=True, alias_of="IT"),
    "SN": CountryRule("Senegal", official=False, alias_of="NE"),
    "SO": CountryRule(
        "Somalia",
        official=True,
        expected_length=23,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, N, "National bank code"),
            FieldSpec(8, 3, N, "Branch code"),
            FieldSpec(11, 12, N, "Account number"),
        ),
    ),
    "ST": CountryRule(
        "São Tomé and Príncipe",
        official=True,
        expected_length=25,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, N, "National bank code"),
            FieldSpec(8, 4, N, "Branch number"),
            FieldSpec(12, 13, N, "Account number"),
        ),
    ),
    "SV": CountryRule(
        "El Salvador",
        official=True,
        expected_length=28,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "National bank code"),
            FieldSpec(8, 20, N, "Account number"),
        ),
    ),
    "TD": CountryRule("Chad", official=False, alias_of="BI"),
    "TG": CountryRule("Togo", official=False, alias_of="NE"),
    "TL": CountryRule(
        "Timor-Leste (East Timor)",
        official=True,
        expected_length=23,
        check_digits=CheckDigitPolicy.fixed(38),
        fields=(
            FieldSpec(4, 3, N, "Bank identifier"),
            FieldSpec(7, 14, N, "Account number"),
            FieldSpec(21, 2, N, "National check digits"),
        ),
    ),
    "TN": CountryRule(
        "Tunisia",
        official=True,
        expected_length=24,
        check_digits=CheckDigitPolicy.fixed(59),
        fields=(
            FieldSpec(4, 2, N, "National bank code"),
            FieldSpec(6, 3, N, "Branch code"),
            FieldSpec(9, 13, N, "Account number"),
            FieldSpec(22, 2, N, "National check digits"),
        ),
    ),
    "TR": CountryRule(
        "Türkiye (Turkey)",
        official=True,
        expected_length=26,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 5, N, "National bank code"),
            FieldSpec(9, 1, Z),
            FieldSpec(10, 16, C, "Account number"),
        ),
    ),
    "UA": CountryRule(
        "Ukraine",
        official=True,
        expected_length=29,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 6, N, "Bank code"),
            FieldSpec(10, 19, C, "Account number"),
        ),
    ),
    "VA": CountryRule(
        "Vatican City",
        official=True,
        expected_length=22,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 3, N, "National bank code"),
            FieldSpec(7, 15, N, "Account number"),
        ),
    ),
    "VG": CountryRule(
        "British Virgin Islands",
        official=True,
        expected_length=24,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "National bank code"),
            FieldSpec(8, 16, N, "Account number"),
        ),
    ),
    "XK": CountryRule(
        "Kosovo",
        official=True,
        expected_length=20,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, N, "National bank code"),
            FieldSpec(8, 12, N, "Account number"),
        ),
    ),
    "YE": CountryRule(
        "Yemen",
        official=True,
        expected_length=30,
        check_digits=MOD97,
        fields=(
            FieldSpec(4, 4, A, "Bank code"),
            FieldSpec(8, 4, N, "Branch code"),
            FieldSpec(12, 18, C, "Account number"),
        ),
    ),
}
