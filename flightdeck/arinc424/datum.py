"""Geodetic datum field of ARINC 424 records."""

from __future__ import annotations

from enum import Enum

from flightdeck.arinc424.fields import UnexpectedCharError, _field


class Datum(Enum):
    """A geodetic datum according to ARINC 424-17 attachment 2."""

    ADI = "ADI"  # Adindan
    AFG = "AFG"  # Afgooye
    AIN = "AIN"  # Ain El Abd 1970
    AMA = "AMA"  # American Samoa 1962
    ANO = "ANO"  # Anna 1 Astro 1965
    AIA = "AIA"  # Antigua Island Astro 1943
    ARF = "ARF"  # Arc 1950
    ARS = "ARS"  # Arc 1960
    ASC = "ASC"  # Ascension Island 1958
    ATF = "ATF"  # Astro Beacon E 1945
    SHB = "SHB"  # Astro DOS 71/4
    TRN = "TRN"  # Astro Tern Island (Frig) 1961
    ASQ = "ASQ"  # Astronomical Station 1952
    AUA = "AUA"  # Australian Geodetic 1966
    AUG = "AUG"  # Australian Geodetic 1984
    PHA = "PHA"  # Ayabelle Lighthouse
    IBE = "IBE"  # Bellevue (IGN)
    BER = "BER"  # Bermuda 1957
    BID = "BID"  # Bissau
    BOO = "BOO"  # Bogota Observatory
    BUR = "BUR"  # Bukit Rimpah
    CAZ = "CAZ"  # Camp Area Astro
    CAI = "CAI"  # Campo Inchauspe 1969
    CAO = "CAO"  # Canton Astro 1966
    CAP = "CAP"  # Cape
    CAC = "CAC"  # Cape Canaveral
    CGE = "CGE"  # Carthage
    CHI = "CHI"  # Chatham Island Astro 1971
    CHU = "CHU"  # Chua Astro
    EST = "EST"  # Co-Ordinate System 1937 of Estonia
    COA = "COA"  # Corrego Alegre
    DAL = "DAL"  # Dabola
    DAN = "DAN"  # Danish Geodetic Institute 1934 System
    DID = "DID"  # Deception Island
    BAT = "BAT"  # Djakarta (Batavia)
    GIZ = "GIZ"  # DOS 1968
    EAS = "EAS"  # Easter Island 1967
    EUR = "EUR"  # European 1950
    FOT = "FOT"  # Fort Thomas 1955
    GAA = "GAA"  # Gan 1970
    GAN = "GAN"  # Gandajika Base
    GEO = "GEO"  # Geodetic Datum 1949
    GRA = "GRA"  # Graciosa Base SW 1948
    GRX = "GRX"  # Greek Geodetic Reference System 1987
    GSE = "GSE"  # Gunuung Segara
    DOB = "DOB"  # GUX 1 Astro
    HEN = "HEN"  # Herat North
    HER = "HER"  # Hermannskogel
    HJO = "HJO"  # Hjorsey 1955
    HKD = "HKD"  # Hong Kong 1963
    HTN = "HTN"  # Hu-Tzu-Shan
    IND = "IND"  # Indian
    INF = "INF"  # Indian 1954
    ING = "ING"  # Indian 1960
    INH = "INH"  # Indian 1975
    IDN = "IDN"  # Indonesian 1974
    IRL = "IRL"  # Ireland 1965
    ISG = "ISG"  # ISTS 061 Astro 1968
    IST = "IST"  # ISTS 073 Astro 1969
    JOH = "JOH"  # Johnston Island 1961
    KAN = "KAN"  # Kandawala
    KEG = "KEG"  # Kerguelen Island 1949
    KEA = "KEA"  # Kertau 1948
    KUS = "KUS"  # Kusaie Astro 1951
    LCF = "LCF"  # L.C. 5 Astro 1961
    LEH = "LEH"  # Leigon
    LIB = "LIB"  # Liberia 1964
    LUZ = "LUZ"  # Luzon
    MPO = "MPO"  # MPoraloko
    MIK = "MIK"  # Mahe 1971
    MCN = "MCN"  # Manchurian Principal System
    MAS = "MAS"  # Massawa
    MER = "MER"  # Merchich
    MID = "MID"  # Midway Astro 1961
    MIN = "MIN"  # Minna
    MOL = "MOL"  # Montjong Lowe
    ASM = "ASM"  # Montserrat Island Astro 1958
    NAH = "NAH"  # Nahrwan
    NAN = "NAN"  # Nanking 1960
    NAP = "NAP"  # Naparima, BWI
    NAS = "NAS"  # North American 1927
    NAR = "NAR"  # North American 1983
    NSD = "NSD"  # North Sahara 1959
    FLO = "FLO"  # Observatorio Meteorologico 1939
    OEG = "OEG"  # Old Egyptian 1907
    OHA = "OHA"  # Old Hawaiian
    FAH = "FAH"  # Oman
    OGB = "OGB"  # Ordnance Survey of Great Britain 1936
    PAM = "PAM"  # Palmer Astro
    PLN = "PLN"  # Pico de las Nieves
    PIT = "PIT"  # Pitcairn Astro 1967
    PTB = "PTB"  # Point 58
    PTN = "PTN"  # Point Noire 1948
    POS = "POS"  # Porto Santo 1936
    PDM = "PDM"  # Potsdam
    PRP = "PRP"  # Provisional South American 1956
    HIT = "HIT"  # Provisional South Chilean 1963
    PUR = "PUR"  # Puerto Rico
    PUK = "PUK"  # Pulkovo 1942
    QAT = "QAT"  # Qatar National
    QUO = "QUO"  # Qornoq
    REU = "REU"  # Reunion
    MOD = "MOD"  # Rome 1940
    RTS = "RTS"  # RT90
    SPK = "SPK"  # S42Pulkovo1942
    SAE = "SAE"  # SantoDOS1965
    SAO = "SAO"  # Sao Braz
    SAP = "SAP"  # Sapper Hill 1943
    SCK = "SCK"  # Schwarzeck
    SGM = "SGM"  # Selvagem Grande 1938
    SRL = "SRL"  # Sierra Leone 1960
    CCD = "CCD"  # S-JTSK
    SAN = "SAN"  # South American 1969
    SOA = "SOA"  # South Asia
    STO = "STO"  # Stockholm 1938
    SYO = "SYO"  # Sydney Observatory
    TAN = "TAN"  # Tananarive Observatory 1925
    TIL = "TIL"  # Timbalai 1948
    TOY = "TOY"  # Tokyo
    TRI = "TRI"  # Trinidad Trigonometrical Survey
    TDC = "TDC"  # Tristan Astro 1968
    UNKNOWN = "U  "
    MVS = "MVS"  # Viti Levu 1916
    VOI = "VOI"  # Voirol 1874
    VOR = "VOR"  # Voirol 1960
    WAK = "WAK"  # Wake Island Astro 1952
    ENW = "ENW"  # Wake-Eniwetok 1960
    WGA = "WGA"  # World Geodetic System 1960
    WGB = "WGB"  # World Geodetic System 1966
    WGC = "WGC"  # World Geodetic System 1972
    WGE = "WGE"  # World Geodetic System 1984
    YAC = "YAC"  # Yacare
    ZAN = "ZAN"  # Zanderij

    @classmethod
    def parse(cls, record: str, start: int) -> Datum:
        """Read the three-column datum code beginning at ``start``."""
        code = _field(record, start, 3)
        try:
            return cls(code)
        except ValueError:
            raise UnexpectedCharError(
                "expected a datum according to ARINC 424-17 attachment 2"
            ) from None