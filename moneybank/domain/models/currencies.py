"""Static catalog of the currencies a bank can be built with.

Formatting data follows the Ruby Money gem: ISO 4217 currencies plus a few
crypto and precious-metal pseudo-currencies.
"""
from moneybank.domain.exceptions.currency import UnsupportedCurrencyError
from moneybank.domain.models.currency import Currency

AED = Currency("United Arab Emirates Dirham", "AED", "د.إ", False, 100, ",", ".")
AFN = Currency("Afghan Afghani", "AFN", "؋", False, 100, ",", ".")
ALL = Currency("Albanian Lek", "ALL", "L", False, 100, ",", ".")
AMD = Currency("Armenian Dram", "AMD", "դր.", False, 100, ",", ".")
ANG = Currency("Netherlands Antillean Gulden", "ANG", "ƒ", True, 100, ".", ",")
AOA = Currency("Angolan Kwanza", "AOA", "Kz", False, 100, ",", ".")
ARS = Currency("Argentine Peso", "ARS", "$", True, 100, ".", ",")
AUD = Currency("Australian Dollar", "AUD", "A$", True, 100, ",", ".")
AWG = Currency("Aruban Florin", "AWG", "ƒ", False, 100, ",", ".")
AZN = Currency("Azerbaijani Manat", "AZN", "₼", True, 100, ",", ".")
BAM = Currency("Bosnia and Herzegovina Convertible Mark", "BAM", "КМ", True, 100, ",", ".")
BBD = Currency("Barbadian Dollar", "BBD", "$", True, 100, ",", ".")
BCH = Currency("Bitcoin Cash", "BCH", "₿", False, 100000000, ",", ".")
BDT = Currency("Bangladeshi Taka", "BDT", "৳", True, 100, ",", ".")
BGN = Currency("Bulgarian Lev", "BGN", "лв.", False, 100, ",", ".")
BHD = Currency("Bahraini Dinar", "BHD", "ب.د", True, 1000, ",", ".")
BIF = Currency("Burundian Franc", "BIF", "Fr", False, 1, ",", ".")
BMD = Currency("Bermudian Dollar", "BMD", "$", True, 100, ",", ".")
BND = Currency("Brunei Dollar", "BND", "$", True, 100, ",", ".")
BOB = Currency("Bolivian Boliviano", "BOB", "Bs.", True, 100, ",", ".")
BRL = Currency("Brazilian Real", "BRL", "R$", True, 100, ".", ",")
BSD = Currency("Bahamian Dollar", "BSD", "$", True, 100, ",", ".")
BTC = Currency("Bitcoin", "BTC", "₿", True, 100000000, ",", ".")
BTN = Currency("Bhutanese Ngultrum", "BTN", "Nu.", False, 100, ",", ".")
BWP = Currency("Botswana Pula", "BWP", "P", True, 100, ",", ".")
BYN = Currency("Belarusian Ruble", "BYN", "Br", False, 100, " ", ",")
BZD = Currency("Belize Dollar", "BZD", "$", True, 100, ",", ".")
CAD = Currency("Canadian Dollar", "CAD", "C$", True, 100, ",", ".")
CDF = Currency("Congolese Franc", "CDF", "Fr", False, 100, ",", ".")
CHF = Currency("Swiss Franc", "CHF", "CHF", True, 100, ",", ".")
CLF = Currency("Unidad de Fomento", "CLF", "UF", True, 10000, ".", ",")
CLP = Currency("Chilean Peso", "CLP", "$", True, 1, ".", ",")
CNH = Currency("Chinese Renminbi Yuan Offshore", "CNH", "¥", True, 100, ",", ".")
CNY = Currency("Chinese Renminbi Yuan", "CNY", "¥", True, 100, ",", ".")
COP = Currency("Colombian Peso", "COP", "$", True, 100, ".", ",")
CRC = Currency("Costa Rican Colón", "CRC", "₡", True, 100, ".", ",")
CUC = Currency("Cuban Convertible Peso", "CUC", "$", False, 100, ",", ".")
CUP = Currency("Cuban Peso", "CUP", "$", True, 100, ",", ".")
CVE = Currency("Cape Verdean Escudo", "CVE", "$", False, 100, ",", ".")
CZK = Currency("Czech Koruna", "CZK", "Kč", False, 100, " ", ",")
DJF = Currency("Djiboutian Franc", "DJF", "Fdj", False, 1, ",", ".")
DKK = Currency("Danish Krone", "DKK", "kr.", False, 100, ".", ",")
DOP = Currency("Dominican Peso", "DOP", "$", True, 100, ",", ".")
DZD = Currency("Algerian Dinar", "DZD", "د.ج", False, 100, ",", ".")
EEK = Currency("Estonian Kroon", "EEK", "KR", False, 100, ",", ".")
EGP = Currency("Egyptian Pound", "EGP", "ج.م", True, 100, ",", ".")
ERN = Currency("Eritrean Nakfa", "ERN", "Nfk", False, 100, ",", ".")
ETB = Currency("Ethiopian Birr", "ETB", "Br", False, 100, ",", ".")
EUR = Currency("Euro", "EUR", "€", True, 100, ".", ",")
FJD = Currency("Fijian Dollar", "FJD", "$", False, 100, ",", ".")
FKP = Currency("Falkland Pound", "FKP", "£", False, 100, ",", ".")
GBP = Currency("British Pound", "GBP", "£", True, 100, ",", ".")
GBX = Currency("British Penny", "GBX", "", True, 1, ",", ".")
GEL = Currency("Georgian Lari", "GEL", "ლ", False, 100, ",", ".")
GGP = Currency("Guernsey Pound", "GGP", "£", True, 100, ",", ".")
GHS = Currency("Ghanaian Cedi", "GHS", "₵", True, 100, ",", ".")
GIP = Currency("Gibraltar Pound", "GIP", "£", True, 100, ",", ".")
GMD = Currency("Gambian Dalasi", "GMD", "D", False, 100, ",", ".")
GNF = Currency("Guinean Franc", "GNF", "Fr", False, 1, ",", ".")
GTQ = Currency("Guatemalan Quetzal", "GTQ", "Q", True, 100, ",", ".")
GYD = Currency("Guyanese Dollar", "GYD", "$", False, 100, ",", ".")
HKD = Currency("Hong Kong Dollar", "HKD", "$", True, 100, ",", ".")
HNL = Currency("Honduran Lempira", "HNL", "L", True, 100, ",", ".")
HRK = Currency("Croatian Kuna", "HRK", "kn", False, 100, ".", ",")
HTG = Currency("Haitian Gourde", "HTG", "G", False, 100, ",", ".")
HUF = Currency("Hungarian Forint", "HUF", "Ft", False, 1, " ", ",")
IDR = Currency("Indonesian Rupiah", "IDR", "Rp", True, 100, ".", ",")
ILS = Currency("Israeli New Sheqel", "ILS", "₪", True, 100, ",", ".")
IMP = Currency("Isle of Man Pound", "IMP", "£", True, 100, ",", ".")
INR = Currency("Indian Rupee", "INR", "₹", True, 100, ",", ".")
IQD = Currency("Iraqi Dinar", "IQD", "ع.د", False, 1000, ",", ".")
IRR = Currency("Iranian Rial", "IRR", "﷼", True, 100, ",", ".")
ISK = Currency("Icelandic Króna", "ISK", "kr", True, 1, ".", ",")
JEP = Currency("Jersey Pound", "JEP", "£", True, 100, ",", ".")
JMD = Currency("Jamaican Dollar", "JMD", "$", True, 100, ",", ".")
JOD = Currency("Jordanian Dinar", "JOD", "د.ا", True, 1000, ",", ".")
JPY = Currency("Japanese Yen", "JPY", "¥", True, 1, ",", ".")
KES = Currency("Kenyan Shilling", "KES", "KSh", True, 100, ",", ".")
KGS = Currency("Kyrgyzstani Som", "KGS", "som", False, 100, ",", ".")
KHR = Currency("Cambodian Riel", "KHR", "៛", False, 100, ",", ".")
KMF = Currency("Comorian Franc", "KMF", "Fr", False, 1, ",", ".")
KPW = Currency("North Korean Won", "KPW", "₩", False, 100, ",", ".")
KRW = Currency("South Korean Won", "KRW", "₩", True, 1, ",", ".")
KWD = Currency("Kuwaiti Dinar", "KWD", "د.ك", True, 1000, ",", ".")
KYD = Currency("Cayman Islands Dollar", "KYD", "$", True, 100, ",", ".")
KZT = Currency("Kazakhstani Tenge", "KZT", "₸", False, 100, ",", ".")
LAK = Currency("Lao Kip", "LAK", "₭", False, 100, ",", ".")
LBP = Currency("Lebanese Pound", "LBP", "ل.ل", True, 100, ",", ".")
LKR = Currency("Sri Lankan Rupee", "LKR", "₨", False, 100, ",", ".")
LRD = Currency("Liberian Dollar", "LRD", "$", False, 100, ",", ".")
LSL = Currency("Lesotho Loti", "LSL", "L", False, 100, ",", ".")
LTL = Currency("Lithuanian Litas", "LTL", "Lt", False, 100, ",", ".")
LVL = Currency("Latvian Lats", "LVL", "Ls", True, 100, ",", ".")
LYD = Currency("Libyan Dinar", "LYD", "ل.د", False, 1000, ",", ".")
MAD = Currency("Moroccan Dirham", "MAD", "د.م.", False, 100, ",", ".")
MDL = Currency("Moldovan Leu", "MDL", "L", False, 100, ",", ".")
MGA = Currency("Malagasy Ariary", "MGA", "Ar", True, 5, ",", ".")
MKD = Currency("Macedonian Denar", "MKD", "ден", False, 100, ",", ".")
MMK = Currency("Myanmar Kyat", "MMK", "K", False, 100, ",", ".")
MNT = Currency("Mongolian Tögrög", "MNT", "₮", False, 100, ",", ".")
MOP = Currency("Macanese Pataca", "MOP", "P", False, 100, ",", ".")
MRO = Currency("Mauritanian Ouguiya", "MRO", "UM", False, 5, ",", ".")
MTL = Currency("Maltese Lira", "MTL", "₤", True, 100, ",", ".")
MUR = Currency("Mauritian Rupee", "MUR", "₨", True, 100, ",", ".")
MVR = Currency("Maldivian Rufiyaa", "MVR", "MVR", False, 100, ",", ".")
MWK = Currency("Malawian Kwacha", "MWK", "MK", False, 100, ",", ".")
MXN = Currency("Mexican Peso", "MXN", "$", True, 100, ",", ".")
MYR = Currency("Malaysian Ringgit", "MYR", "RM", True, 100, ",", ".")
MZN = Currency("Mozambican Metical", "MZN", "MTn", True, 100, ".", ",")
NAD = Currency("Namibian Dollar", "NAD", "$", False, 100, ",", ".")
NGN = Currency("Nigerian Naira", "NGN", "₦", True, 100, ",", ".")
NIO = Currency("Nicaraguan Córdoba", "NIO", "C$", True, 100, ",", ".")
NOK = Currency("Norwegian Krone", "NOK", "kr", False, 100, ".", ",")
NPR = Currency("Nepalese Rupee", "NPR", "₨", True, 100, ",", ".")
NZD = Currency("New Zealand Dollar", "NZD", "$", True, 100, ",", ".")
OMR = Currency("Omani Rial", "OMR", "ر.ع.", True, 1000, ",", ".")
PAB = Currency("Panamanian Balboa", "PAB", "B/.", True, 100, ",", ".")
PEN = Currency("Peruvian Sol", "PEN", "S/", True, 100, ",", ".")
PGK = Currency("Papua New Guinean Kina", "PGK", "K", False, 100, ",", ".")
PHP = Currency("Philippine Peso", "PHP", "₱", True, 100, ",", ".")
PKR = Currency("Pakistani Rupee", "PKR", "₨", True, 100, ",", ".")
PLN = Currency("Polish Złoty", "PLN", "zł", False, 100, " ", ",")
PYG = Currency("Paraguayan Guaraní", "PYG", "₲", True, 1, ",", ".")
QAR = Currency("Qatari Riyal", "QAR", "ر.ق", False, 100, ",", ".")
RON = Currency("Romanian Leu", "RON", "Lei", False, 100, ".", ",")
RSD = Currency("Serbian Dinar", "RSD", "РСД", True, 100, ",", ".")
RUB = Currency("Russian Ruble", "RUB", "₽", False, 100, ".", ",")
RWF = Currency("Rwandan Franc", "RWF", "FRw", False, 1, ",", ".")
SAR = Currency("Saudi Riyal", "SAR", "ر.س", True, 100, ",", ".")
SBD = Currency("Solomon Islands Dollar", "SBD", "$", False, 100, ",", ".")
SCR = Currency("Seychellois Rupee", "SCR", "₨", False, 100, ",", ".")
SDG = Currency("Sudanese Pound", "SDG", "£", True, 100, ",", ".")
SEK = Currency("Swedish Krona", "SEK", "kr", False, 100, " ", ",")
SGD = Currency("Singapore Dollar", "SGD", "$", True, 100, ",", ".")
SHP = Currency("Saint Helenian Pound", "SHP", "£", False, 100, ",", ".")
SKK = Currency("Slovak Koruna", "SKK", "Sk", True, 100, ",", ".")
SLL = Currency("Sierra Leonean Leone", "SLL", "Le", False, 100, ",", ".")
SOS = Currency("Somali Shilling", "SOS", "Sh", False, 100, ",", ".")
SRD = Currency("Surinamese Dollar", "SRD", "$", False, 100, ",", ".")
SSP = Currency("South Sudanese Pound", "SSP", "£", False, 100, ",", ".")
STD = Currency("São Tomé and Príncipe Dobra", "STD", "Db", False, 100, ",", ".")
SVC = Currency("Salvadoran Colón", "SVC", "₡", True, 100, ",", ".")
SYP = Currency("Syrian Pound", "SYP", "£S", False, 100, ",", ".")
SZL = Currency("Swazi Lilangeni", "SZL", "E", True, 100, ",", ".")
THB = Currency("Thai Baht", "THB", "฿", True, 100, ",", ".")
TJS = Currency("Tajikistani Somoni", "TJS", "ЅМ", False, 100, ",", ".")
TMT = Currency("Turkmenistani Manat", "TMT", "T", False, 100, ",", ".")
TND = Currency("Tunisian Dinar", "TND", "د.ت", False, 1000, ",", ".")
TOP = Currency("Tongan Paʻanga", "TOP", "T$", True, 100, ",", ".")
TRY = Currency("Turkish Lira", "TRY", "₺", True, 100, ".", ",")
TTD = Currency("Trinidad and Tobago Dollar", "TTD", "$", False, 100, ",", ".")
TWD = Currency("New Taiwan Dollar", "TWD", "$", True, 100, ",", ".")
TZS = Currency("Tanzanian Shilling", "TZS", "Sh", True, 100, ",", ".")
UAH = Currency("Ukrainian Hryvnia", "UAH", "₴", False, 100, ",", ".")
UGX = Currency("Ugandan Shilling", "UGX", "USh", False, 1, ",", ".")
USD = Currency("United States Dollar", "USD", "$", True, 100, ",", ".")
UYU = Currency("Uruguayan Peso", "UYU", "$", True, 100, ".", ",")
UZS = Currency("Uzbekistan Som", "UZS", "so'm", False, 100, ",", ".")
VEF = Currency("Venezuelan Bolívar", "VEF", "Bs.F", True, 100, ".", ",")
VES = Currency("Venezuelan Bolívar Soberano", "VES", "Bs", True, 100, ".", ",")
VND = Currency("Vietnamese Đồng", "VND", "₫", False, 1, ".", ",")
VUV = Currency("Vanuatu Vatu", "VUV", "Vt", True, 1, ",", ".")
WST = Currency("Samoan Tala", "WST", "T", False, 100, ",", ".")
XAF = Currency("Central African Cfa Franc", "XAF", "Fr", False, 1, ",", ".")
XAG = Currency("Silver (Troy Ounce)", "XAG", "oz t", False, 1, ",", ".")
XAU = Currency("Gold (Troy Ounce)", "XAU", "oz t", False, 1, ",", ".")
XBA = Currency("European Composite Unit", "XBA", "", False, 1, ",", ".")
XBB = Currency("European Monetary Unit", "XBB", "", False, 1, ",", ".")
XBC = Currency("European Unit of Account 9", "XBC", "", False, 1, ",", ".")
XBD = Currency("European Unit of Account 17", "XBD", "", False, 1, ",", ".")
XCD = Currency("East Caribbean Dollar", "XCD", "$", True, 100, ",", ".")
XDR = Currency("Special Drawing Rights", "XDR", "SDR", False, 1, ",", ".")
XFU = Currency("UIC Franc", "XFU", "", True, 100, ",", ".")
XOF = Currency("West African Cfa Franc", "XOF", "Fr", False, 1, ",", ".")
XPD = Currency("Palladium", "XPD", "oz t", False, 1, ",", ".")
XPF = Currency("Cfp Franc", "XPF", "Fr", False, 1, ",", ".")
XPT = Currency("Platinum", "XPT", "oz t", False, 1, ",", ".")
XTS = Currency("Codes specifically reserved for testing purposes", "XTS", "", False, 1, ",", ".")
YER = Currency("Yemeni Rial", "YER", "﷼", False, 100, ",", ".")
ZAR = Currency("South African Rand", "ZAR", "R", True, 100, ",", ".")
ZMW = Currency("Zambian Kwacha", "ZMW", "K", True, 100, ",", ".")
ZWL = Currency("Zimbabwean Dollar", "ZWL", "$", True, 100, ",", ".")


ALL_CURRENCIES: list[Currency] = [
    AED,
    AFN,
    ALL,
    AMD,
    ANG,
    AOA,
    ARS,
    AUD,
    AWG,
    AZN,
    BAM,
    BBD,
    BCH,
    BDT,
    BGN,
    BHD,
    BIF,
    BMD,
    BND,
    BOB,
    BRL,
    BSD,
    BTC,
    BTN,
    BWP,
    BYN,
    BZD,
    CAD,
    CDF,
    CHF,
    CLF,
    CLP,
    CNH,
    CNY,
    COP,
    CRC,
    CUC,
    CUP,
    CVE,
    CZK,
    DJF,
    DKK,
    DOP,
    DZD,
    EEK,
    EGP,
    ERN,
    ETB,
    EUR,
    FJD,
    FKP,
    GBP,
    GBX,
    GEL,
    GGP,
    GHS,
    GIP,
    GMD,
    GNF,
    GTQ,
    GYD,
    HKD,
    HNL,
    HRK,
    HTG,
    HUF,
    IDR,
    ILS,
    IMP,
    INR,
    IQD,
    IRR,
    ISK,
    JEP,
    JMD,
    JOD,
    JPY,
    KES,
    KGS,
    KHR,
    KMF,
    KPW,
    KRW,
    KWD,
    KYD,
    KZT,
    LAK,
    LBP,
    LKR,
    LRD,
    LSL,
    LTL,
    LVL,
    LYD,
    MAD,
    MDL,
    MGA,
    MKD,
    MMK,
    MNT,
    MOP,
    MRO,
    MTL,
    MUR,
    MVR,
    MWK,
    MXN,
    MYR,
    MZN,
    NAD,
    NGN,
    NIO,
    NOK,
    NPR,
    NZD,
    OMR,
    PAB,
    PEN,
    PGK,
    PHP,
    PKR,
    PLN,
    PYG,
    QAR,
    RON,
    RSD,
    RUB,
    RWF,
    SAR,
    SBD,
    SCR,
    SDG,
    SEK,
    SGD,
    SHP,
    SKK,
    SLL,
    SOS,
    SRD,
    SSP,
    STD,
    SVC,
    SYP,
    SZL,
    THB,
    TJS,
    TMT,
    TND,
    TOP,
    TRY,
    TTD,
    TWD,
    TZS,
    UAH,
    UGX,
    USD,
    UYU,
    UZS,
    VEF,
    VES,
    VND,
    VUV,
    WST,
    XAF,
    XAG,
    XAU,
    XBA,
    XBB,
    XBC,
    XBD,
    XCD,
    XDR,
    XFU,
    XOF,
    XPD,
    XPF,
    XPT,
    XTS,
    YER,
    ZAR,
    ZMW,
    ZWL,
]

CURRENCIES_BY_CODE: dict[str, Currency] = {currency.iso_code: currency for currency in ALL_CURRENCIES}


def describe(code: str) -> Currency:
    try:
        return CURRENCIES_BY_CODE[code]
    except KeyError:
        raise UnsupportedCurrencyError(code) from None
