"""
ISO 3166-1 Reference Data
-------------------------

Static country table shipped with the package. Nothing here is read from disk
or the network; the registry in countryindex.py is folded from these tuples.

  - COUNTRY_ROWS: (identifier, numeric_code, alpha2, alpha3, canonical_name)
  - COUNTRY_ALIASES: alpha2 -> current alternate names
  - RENAMED_ALIASES: alpha2 -> ((former name, rename note), ...)

Aliases are written without separators ("UnitedKingdom", not "United Kingdom")
so that they match the compact lookup form directly.
"""

COUNTRY_ROWS = (
    ("afghanistan", "004", "AF", "AFG", "Afghanistan"),
    ("aland_islands", "248", "AX", "ALA", "Aland Islands"),
    ("albania", "008", "AL", "ALB", "Albania"),
    ("algeria", "012", "DZ", "DZA", "Algeria"),
    ("american_samoa", "016", "AS", "ASM", "American Samoa"),
    ("andorra", "020", "AD", "AND", "Andorra"),
    ("angola", "024", "AO", "AGO", "Angola"),
    ("anguilla", "660", "AI", "AIA", "Anguilla"),
    ("antarctica", "010", "AQ", "ATA", "Antarctica"),
    ("antigua_and_barbuda", "028", "AG", "ATG", "Antigua And Barbuda"),
    ("argentina", "032", "AR", "ARG", "Argentina"),
    ("armenia", "051", "AM", "ARM", "Armenia"),
    ("aruba", "533", "AW", "ABW", "Aruba"),
    ("ascension_and_tristan_da_cunha_saint_helena", "654", "SH", "SHN", "Ascension And Tristan Da Cunha Saint Helena"),
    ("australia", "036", "AU", "AUS", "Australia"),
    ("austria", "040", "AT", "AUT", "Austria"),
    ("azerbaijan", "031", "AZ", "AZE", "Azerbaijan"),
    ("bahrain", "048", "BH", "BHR", "Bahrain"),
    ("bangladesh", "050", "BD", "BGD", "Bangladesh"),
    ("barbados", "052", "BB", "BRB", "Barbados"),
    ("belarus", "112", "BY", "BLR", "Belarus"),
    ("belgium", "056", "BE", "BEL", "Belgium"),
    ("belize", "084", "BZ", "BLZ", "Belize"),
    ("benin", "204", "BJ", "BEN", "Benin"),
    ("bermuda", "060", "BM", "BMU", "Bermuda"),
    ("bhutan", "064", "BT", "BTN", "Bhutan"),
    ("bolivarian_republic_of_venezuela", "862", "VE", "VEN", "Bolivarian Republic Of Venezuela"),
    ("bolivia", "068", "BO", "BOL", "Bolivia"),
    ("bonaire", "535", "BQ", "BES", "Bonaire"),
    ("bosnia_and_herzegovina", "070", "BA", "BIH", "Bosnia And Herzegovina"),
    ("botswana", "072", "BW", "BWA", "Botswana"),
    ("bouvet_island", "074", "BV", "BVT", "Bouvet Island"),
    ("brazil", "076", "BR", "BRA", "Brazil"),
    ("british_indian_ocean_territory", "086", "IO", "IOT", "British Indian Ocean Territory"),
    ("british_virgin_islands", "092", "VG", "VGB", "British Virgin Islands"),
    ("brunei_darussalam", "096", "BN", "BRN", "Brunei Darussalam"),
    ("bulgaria", "100", "BG", "BGR", "Bulgaria"),
    ("burkina_faso", "854", "BF", "BFA", "Burkina Faso"),
    ("burundi", "108", "BI", "BDI", "Burundi"),
    ("cabo_verde", "132", "CV", "CPV", "Cabo Verde"),
    ("cambodia", "116", "KH", "KHM", "Cambodia"),
    ("cameroon", "120", "CM", "CMR", "Cameroon"),
    ("canada", "124", "CA", "CAN", "Canada"),
    ("chad", "148", "TD", "TCD", "Chad"),
    ("chile", "152", "CL", "CHL", "Chile"),
    ("china", "156", "CN", "CHN", "China"),
    ("christmas_island", "162", "CX", "CXR", "Christmas Island"),
    ("colombia", "170", "CO", "COL", "Colombia"),
    ("costa_rica", "188", "CR", "CRI", "Costa Rica"),
    ("coted_ivoire", "384", "CI", "CIV", "Coted Ivoire"),
    ("croatia", "191", "HR", "HRV", "Croatia"),
    ("cuba", "192", "CU", "CUB", "Cuba"),
    ("curacao", "531", "CW", "CUW", "Curacao"),
    ("cyprus", "196", "CY", "CYP", "Cyprus"),
    ("czechia", "203", "CZ", "CZE", "Czechia"),
    ("denmark", "208", "DK", "DNK", "Denmark"),
    ("djibouti", "262", "DJ", "DJI", "Djibouti"),
    ("dominica", "212", "DM", "DMA", "Dominica"),
    ("dutch_part_sint_maarten", "534", "SX", "SXM", "Dutch Part Sint Maarten"),
    ("ecuador", "218", "EC", "ECU", "Ecuador"),
    ("egypt", "818", "EG", "EGY", "Egypt"),
    ("el_salvador", "222", "SV", "SLV", "El Salvador"),
    ("equatorial_guinea", "226", "GQ", "GNQ", "Equatorial Guinea"),
    ("eritrea", "232", "ER", "ERI", "Eritrea"),
    ("estonia", "233", "EE", "EST", "Estonia"),
    ("eswatini", "748", "SZ", "SWZ", "Eswatini"),
    ("ethiopia", "231", "ET", "ETH", "Ethiopia"),
    ("federated_states_of_micronesia", "583", "FM", "FSM", "Federated States Of Micronesia"),
    ("fiji", "242", "FJ", "FJI", "Fiji"),
    ("finland", "246", "FI", "FIN", "Finland"),
    ("france", "250", "FR", "FRA", "France"),
    ("french_guiana", "254", "GF", "GUF", "French Guiana"),
    ("french_part_saint_martin", "663", "MF", "MAF", "French Part Saint Martin"),
    ("french_polynesia", "258", "PF", "PYF", "French Polynesia"),
    ("gabon", "266", "GA", "GAB", "Gabon"),
    ("georgia", "268", "GE", "GEO", "Georgia"),
    ("germany", "276", "DE", "DEU", "Germany"),
    ("ghana", "288", "GH", "GHA", "Ghana"),
    ("gibraltar", "292", "GI", "GIB", "Gibraltar"),
    ("greece", "300", "GR", "GRC", "Greece"),
    ("greenland", "304", "GL", "GRL", "Greenland"),
    ("grenada", "308", "GD", "GRD", "Grenada"),
    ("guadeloupe", "312", "GP", "GLP", "Guadeloupe"),
    ("guam", "316", "GU", "GUM", "Guam"),
    ("guatemala", "320", "GT", "GTM", "Guatemala"),
    ("guernsey", "831", "GG", "GGY", "Guernsey"),
    ("guinea", "324", "GN", "GIN", "Guinea"),
    ("guinea_bissau", "624", "GW", "GNB", "Guinea Bissau"),
    ("guyana", "328", "GY", "GUY", "Guyana"),
    ("haiti", "332", "HT", "HTI", "Haiti"),
    ("heard_island_and_mc_donald_islands", "334", "HM", "HMD", "Heard Island And Mc Donald Islands"),
    ("honduras", "340", "HN", "HND", "Honduras"),
    ("hong_kong", "344", "HK", "HKG", "Hong Kong"),
    ("hungary", "348", "HU", "HUN", "Hungary"),
    ("iceland", "352", "IS", "ISL", "Iceland"),
    ("india", "356", "IN", "IND", "India"),
    ("indonesia", "360", "ID", "IDN", "Indonesia"),
    ("iraq", "368", "IQ", "IRQ", "Iraq"),
    ("ireland", "372", "IE", "IRL", "Ireland"),
    ("islamic_republic_of_iran", "364", "IR", "IRN", "Islamic Republic Of Iran"),
    ("isle_of_man", "833", "IM", "IMN", "Isle Of Man"),
    ("israel", "376", "IL", "ISR", "Israel"),
    ("italy", "380", "IT", "ITA", "Italy"),
    ("jamaica", "388", "JM", "JAM", "Jamaica"),
    ("japan", "392", "JP", "JPN", "Japan"),
    ("jersey", "832", "JE", "JEY", "Jersey"),
    ("jordan", "400", "JO", "JOR", "Jordan"),
    ("kazakhstan", "398", "KZ", "KAZ", "Kazakhstan"),
    ("kenya", "404", "KE", "KEN", "Kenya"),
    ("kiribati", "296", "KI", "KIR", "Kiribati"),
    ("kosovo", "383", "XK", "XKX", "Kosovo"),
    ("kuwait", "414", "KW", "KWT", "Kuwait"),
    ("kyrgyzstan", "417", "KG", "KGZ", "Kyrgyzstan"),
    ("latvia", "428", "LV", "LVA", "Latvia"),
    ("lebanon", "422", "LB", "LBN", "Lebanon"),
    ("lesotho", "426", "LS", "LSO", "Lesotho"),
    ("liberia", "430", "LR", "LBR", "Liberia"),
    ("libya", "434", "LY", "LBY", "Libya"),
    ("liechtenstein", "438", "LI", "LIE", "Liechtenstein"),
    ("lithuania", "440", "LT", "LTU", "Lithuania"),
    ("luxembourg", "442", "LU", "LUX", "Luxembourg"),
    ("macao", "446", "MO", "MAC", "Macao"),
    ("madagascar", "450", "MG", "MDG", "Madagascar"),
    ("malawi", "454", "MW", "MWI", "Malawi"),
    ("malaysia", "458", "MY", "MYS", "Malaysia"),
    ("maldives", "462", "MV", "MDV", "Maldives"),
    ("mali", "466", "ML", "MLI", "Mali"),
    ("malta", "470", "MT", "MLT", "Malta"),
    ("martinique", "474", "MQ", "MTQ", "Martinique"),
    ("mauritania", "478", "MR", "MRT", "Mauritania"),
    ("mauritius", "480", "MU", "MUS", "Mauritius"),
    ("mayotte", "175", "YT", "MYT", "Mayotte"),
    ("mexico", "484", "MX", "MEX", "Mexico"),
    ("monaco", "492", "MC", "MCO", "Monaco"),
    ("mongolia", "496", "MN", "MNG", "Mongolia"),
    ("montenegro", "499", "ME", "MNE", "Montenegro"),
    ("montserrat", "500", "MS", "MSR", "Montserrat"),
    ("morocco", "504", "MA", "MAR", "Morocco"),
    ("mozambique", "508", "MZ", "MOZ", "Mozambique"),
    ("myanmar", "104", "MM", "MMR", "Myanmar"),
    ("namibia", "516", "NA", "NAM", "Namibia"),
    ("nauru", "520", "NR", "NRU", "Nauru"),
    ("nepal", "524", "NP", "NPL", "Nepal"),
    ("new_caledonia", "540", "NC", "NCL", "New Caledonia"),
    ("new_zealand", "554", "NZ", "NZL", "New Zealand"),
    ("nicaragua", "558", "NI", "NIC", "Nicaragua"),
    ("nigeria", "566", "NG", "NGA", "Nigeria"),
    ("niue", "570", "NU", "NIU", "Niue"),
    ("norfolk_island", "574", "NF", "NFK", "Norfolk Island"),
    ("norway", "578", "NO", "NOR", "Norway"),
    ("oman", "512", "OM", "OMN", "Oman"),
    ("pakistan", "586", "PK", "PAK", "Pakistan"),
    ("palau", "585", "PW", "PLW", "Palau"),
    ("panama", "591", "PA", "PAN", "Panama"),
    ("papua_new_guinea", "598", "PG", "PNG", "Papua New Guinea"),
    ("paraguay", "600", "PY", "PRY", "Paraguay"),
    ("peru", "604", "PE", "PER", "Peru"),
    ("pitcairn", "612", "PN", "PCN", "Pitcairn"),
    ("poland", "616", "PL", "POL", "Poland"),
    ("portugal", "620", "PT", "PRT", "Portugal"),
    ("puerto_rico", "630", "PR", "PRI", "Puerto Rico"),
    ("qatar", "634", "QA", "QAT", "Qatar"),
    ("republic_of_north_macedonia", "807", "MK", "MKD", "Republic Of North Macedonia"),
    ("reunion", "638", "RE", "REU", "Reunion"),
    ("romania", "642", "RO", "ROU", "Romania"),
    ("rwanda", "646", "RW", "RWA", "Rwanda"),
    ("saint_barthelemy", "652", "BL", "BLM", "Saint Barthelemy"),
    ("saint_kitts_and_nevis", "659", "KN", "KNA", "Saint Kitts And Nevis"),
    ("saint_lucia", "662", "LC", "LCA", "Saint Lucia"),
    ("saint_pierre_and_miquelon", "666", "PM", "SPM", "Saint Pierre And Miquelon"),
    ("saint_vincent_and_the_grenadines", "670", "VC", "VCT", "Saint Vincent And The Grenadines"),
    ("samoa", "882", "WS", "WSM", "Samoa"),
    ("san_marino", "674", "SM", "SMR", "San Marino"),
    ("sao_tome_and_principe", "678", "ST", "STP", "Sao Tome And Principe"),
    ("saudi_arabia", "682", "SA", "SAU", "Saudi Arabia"),
    ("senegal", "686", "SN", "SEN", "Senegal"),
    ("serbia", "688", "RS", "SRB", "Serbia"),
    ("seychelles", "690", "SC", "SYC", "Seychelles"),
    ("sierra_leone", "694", "SL", "SLE", "Sierra Leone"),
    ("singapore", "702", "SG", "SGP", "Singapore"),
    ("slovakia", "703", "SK", "SVK", "Slovakia"),
    ("slovenia", "705", "SI", "SVN", "Slovenia"),
    ("solomon_islands", "090", "SB", "SLB", "Solomon Islands"),
    ("somalia", "706", "SO", "SOM", "Somalia"),
    ("south_africa", "710", "ZA", "ZAF", "South Africa"),
    ("south_georgia_and_the_south_sandwich_islands", "239", "GS", "SGS", "South Georgia And The South Sandwich Islands"),
    ("south_sudan", "728", "SS", "SSD", "South Sudan"),
    ("spain", "724", "ES", "ESP", "Spain"),
    ("sri_lanka", "144", "LK", "LKA", "Sri Lanka"),
    ("state_of_palestine", "275", "PS", "PSE", "State Of Palestine"),
    ("suriname", "740", "SR", "SUR", "Suriname"),
    ("svalbard_and_jan_mayen", "744", "SJ", "SJM", "Svalbard And Jan Mayen"),
    ("sweden", "752", "SE", "SWE", "Sweden"),
    ("switzerland", "756", "CH", "CHE", "Switzerland"),
    ("syrian_arab_republic", "760", "SY", "SYR", "Syrian Arab Republic"),
    ("taiwan", "158", "TW", "TWN", "Taiwan, Republic Of China"),
    ("tajikistan", "762", "TJ", "TJK", "Tajikistan"),
    ("thailand", "764", "TH", "THA", "Thailand"),
    ("the_bahamas", "044", "BS", "BHS", "The Bahamas"),
    ("the_cayman_islands", "136", "KY", "CYM", "The Cayman Islands"),
    ("the_central_african_republic", "140", "CF", "CAF", "The Central African Republic"),
    ("the_cocos_keeling_islands", "166", "CC", "CCK", "The Cocos Keeling Islands"),
    ("the_comoros", "174", "KM", "COM", "The Comoros"),
    ("the_congo", "178", "CG", "COG", "The Congo"),
    ("the_cook_islands", "184", "CK", "COK", "The Cook Islands"),
    ("the_democratic_peoples_republic_of_korea", "408", "KP", "PRK", "The Democratic Peoples Republic Of Korea"),
    ("the_democratic_republic_of_the_congo", "180", "CD", "COD", "The Democratic Republic Of The Congo"),
    ("the_dominican_republic", "214", "DO", "DOM", "The Dominican Republic"),
    ("the_falkland_islands_malvinas", "238", "FK", "FLK", "The Falkland Islands Malvinas"),
    ("the_faroe_islands", "234", "FO", "FRO", "The Faroe Islands"),
    ("the_french_southern_territories", "260", "TF", "ATF", "The French Southern Territories"),
    ("the_gambia", "270", "GM", "GMB", "The Gambia"),
    ("the_holy_see", "336", "VA", "VAT", "The Holy See"),
    ("the_lao_peoples_democratic_republic", "418", "LA", "LAO", "The Lao Peoples Democratic Republic"),
    ("the_marshall_islands", "584", "MH", "MHL", "The Marshall Islands"),
    ("the_netherlands", "528", "NL", "NLD", "The Netherlands"),
    ("the_niger", "562", "NE", "NER", "The Niger"),
    ("the_northern_mariana_islands", "580", "MP", "MNP", "The Northern Mariana Islands"),
    ("the_philippines", "608", "PH", "PHL", "The Philippines"),
    ("the_republic_of_korea", "410", "KR", "KOR", "The Republic Of Korea"),
    ("the_republic_of_moldova", "498", "MD", "MDA", "The Republic Of Moldova"),
    ("the_russian_federation", "643", "RU", "RUS", "The Russian Federation"),
    ("the_sudan", "729", "SD", "SDN", "The Sudan"),
    ("the_turks_and_caicos_islands", "796", "TC", "TCA", "The Turks And Caicos Islands"),
    ("the_united_arab_emirates", "784", "AE", "ARE", "The United Arab Emirates"),
    ("the_united_kingdom_of_great_britain_and_northern_ireland", "826", "GB", "GBR", "The United Kingdom Of Great Britain And Northern Ireland"),
    ("the_united_states_minor_outlying_islands", "581", "UM", "UMI", "The United States Minor Outlying Islands"),
    ("the_united_states_of_america", "840", "US", "USA", "The United States Of America"),
    ("timor_leste", "626", "TL", "TLS", "Timor Leste"),
    ("togo", "768", "TG", "TGO", "Togo"),
    ("tokelau", "772", "TK", "TKL", "Tokelau"),
    ("tonga", "776", "TO", "TON", "Tonga"),
    ("trinidad_and_tobago", "780", "TT", "TTO", "Trinidad And Tobago"),
    ("tunisia", "788", "TN", "TUN", "Tunisia"),
    ("turkey", "792", "TR", "TUR", "Türkiye"),
    ("turkmenistan", "795", "TM", "TKM", "Turkmenistan"),
    ("tuvalu", "798", "TV", "TUV", "Tuvalu"),
    ("us_virgin_islands", "850", "VI", "VIR", "US Virgin Islands"),
    ("uganda", "800", "UG", "UGA", "Uganda"),
    ("ukraine", "804", "UA", "UKR", "Ukraine"),
    ("united_republic_of_tanzania", "834", "TZ", "TZA", "United Republic Of Tanzania"),
    ("uruguay", "858", "UY", "URY", "Uruguay"),
    ("uzbekistan", "860", "UZ", "UZB", "Uzbekistan"),
    ("vanuatu", "548", "VU", "VUT", "Vanuatu"),
    ("vietnam", "704", "VN", "VNM", "Vietnam"),
    ("wallis_and_futuna", "876", "WF", "WLF", "Wallis And Futuna"),
    ("western_sahara", "732", "EH", "ESH", "Western Sahara"),
    ("yemen", "887", "YE", "YEM", "Yemen"),
    ("zambia", "894", "ZM", "ZMB", "Zambia"),
    ("zimbabwe", "716", "ZW", "ZWE", "Zimbabwe"),
)


COUNTRY_ALIASES = {
    "AE": ("UnitedArabEmirates",),
    "BA": ("Bosnia", "Herzegovina"),
    "BF": ("Burkina",),
    "BL": ("StBarthelemy",),
    "BN": ("Brunei",),
    "BS": ("Bahamas",),
    "CC": ("CocosIslands", "KeelingIslands"),
    "CD": ("DemocraticRepublicOfTheCongo",),
    "CF": ("CentralAfricanRepublic",),
    "CG": ("Congo",),
    "CI": ("CoteDIvoire",),
    "CK": ("CookIslands",),
    "CV": ("CaboVerde",),
    "CZ": ("CzechRepublic",),
    "DO": ("DominicanRepublic",),
    "FK": ("Malvinas", "FalklandIslands"),
    "FM": ("Micronesia",),
    "FO": ("FaroeIslands",),
    "GB": (
        "England",
        "Scotland",
        "GreatBritain",
        "UnitedKingdom",
        "NorthernIreland",
        "UnitedKingdomOfGreatBritain",
        "UnitedKingdomOfGreatBritainAndNorthernIreland",
    ),
    "GM": ("Gambia",),
    "GS": ("SouthGeorgia", "SouthSandwichIslands"),
    "HM": ("HeardIsland", "McDonaldIslands"),
    "IR": ("Iran",),
    "KM": ("Comoros",),
    "KN": ("StKitts",),
    "KP": ("NorthKorea", "DemocraticPeoplesRepublicOfKorea"),
    "KR": ("SouthKorea", "RepublicOfKorea"),
    "KY": ("CaymanIslands",),
    "LA": ("LaoPeoplesDemocraticRepublic", "Laos"),
    "LC": ("StLucia",),
    "MD": ("Moldova", "RepublicOfMoldova"),
    "MF": ("StMartin", "SaintMartin"),
    "MH": ("MarshallIslands",),
    "MK": ("NorthMacedonia",),
    "MM": ("Myanmar",),
    "MO": ("Macau",),
    "MP": ("NorthernMarianaIslands",),
    "NE": ("Niger",),
    "NL": ("Netherlands", "Holland"),
    "PH": ("Philippines",),
    "PM": ("StPierre", "SaintPierre"),
    "PS": ("Palestine",),
    "RU": ("Russia", "RussianFederation"),
    "SD": ("Sudan",),
    "SH": ("StHelena", "SaintHelena"),
    "ST": ("SaoTome",),
    "SX": ("StMaarten", "SaintMaarten"),
    "SY": ("Syria",),
    "SZ": ("Eswatini",),
    "TC": ("TurksAndCaicosIslands",),
    "TF": ("FrenchSouthernTerritories",),
    "TL": ("EastTimor",),
    "TR": ("Turkiye",),
    "TT": ("Trinidad", "Tobago"),
    "TW": ("Taiwan", "台灣", "RepublicOfChina", "中華民國"),
    "TZ": ("Tanzania",),
    "UM": ("UnitedStatesMinorOutlyingIslands",),
    "US": ("America", "UnitedStates", "UnitedStatesOfAmerica"),
    "VA": ("HolySee", "Vatican", "VaticanCity"),
    "VC": ("StVincent", "SaintVincent"),
    "VE": ("Venezuela",),
}


# Former official designations. They resolve exactly like current aliases.
RENAMED_ALIASES = {
    "CI": (("IvoryCoast", "Ivory Coast was renamed to Coted Ivoire in 1986"),),
    "CV": (("CapeVerde", "Cape Verde was renamed to Cabo Verde in 2013"),),
    "MK": (("Macedonia", "Macedonia was renamed to Republic Of North Macedonia in 2019"),),
    "MM": (("Burma", "Burma was renamed to Myanmar in 1989"),),
    "SZ": (("Swaziland", "Swaziland was renamed to Eswatini in 2018"),),
    "TR": (("Turkey", "Turkey was renamed to Türkiye in 2022"),),
}


__all__ = [
    "COUNTRY_ROWS",
    "COUNTRY_ALIASES",
    "RENAMED_ALIASES",
]
