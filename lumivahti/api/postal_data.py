# lumivahti/api/postal_data.py
"""
Käsin koottu postinumerotaulukko: postinumero → (lat, lon, kunta).

Taulukon osumat eivät vaadi verkkoyhteyttä. Puuttuvat numerot haetaan
geokoodauksella (ks. geocode.py).
"""

from __future__ import annotations

from typing import Final

POSTAL_CODES: Final[dict[str, tuple[float, float, str]]] = {
    # Kuopio ja lähialueet (alle 80 km)
    "70100": (62.8933, 27.6783, "Kuopio"),
    "70110": (62.8950, 27.6800, "Kuopio"),
    "70200": (62.9000, 27.6700, "Kuopio"),
    "70210": (62.8800, 27.6900, "Kuopio"),
    "70300": (62.8700, 27.6500, "Kuopio"),
    "70340": (62.8600, 27.6600, "Kuopio"),
    "70400": (62.9100, 27.7000, "Kuopio"),
    "70420": (62.9200, 27.7100, "Kuopio"),
    "70500": (62.8500, 27.6400, "Kuopio"),
    "70600": (62.8400, 27.6200, "Kuopio"),
    "70700": (62.8300, 27.6000, "Kuopio"),
    "70800": (62.8200, 27.5800, "Kuopio"),
    "70820": (62.8150, 27.5700, "Kuopio"),
    "70840": (62.8100, 27.5600, "Kuopio"),
    "70870": (62.8050, 27.5500, "Kuopio"),
    "70900": (62.8000, 27.5400, "Kuopio"),
    "71100": (62.9500, 27.7200, "Kuopio"),
    "71130": (62.9600, 27.7300, "Kuopio"),
    "71150": (62.9700, 27.7400, "Kuopio"),
    "71160": (62.9800, 27.7500, "Kuopio"),
    "71200": (63.0000, 27.7600, "Kuopio"),
    "71310": (63.0200, 27.7800, "Kuopio"),
    "71330": (63.0300, 27.7900, "Kuopio"),
    "71380": (63.0400, 27.8000, "Kuopio"),
    "71460": (63.0600, 27.8200, "Kuopio"),
    "71470": (63.0700, 27.8300, "Kuopio"),
    "71480": (63.0800, 27.8400, "Kuopio"),
    "71490": (63.0900, 27.8500, "Kuopio"),
    "71520": (62.8600, 27.4000, "Kuopio"),
    "71530": (62.8500, 27.3800, "Kuopio"),
    "71540": (62.8400, 27.3600, "Kuopio"),
    "71570": (62.8200, 27.3200, "Kuopio"),
    "71610": (62.7800, 27.2800, "Kuopio"),
    "71620": (62.7600, 27.2600, "Kuopio"),
    "71630": (62.7400, 27.2400, "Kuopio"),
    "71640": (62.7200, 27.2200, "Kuopio"),
    "71650": (62.7000, 27.2000, "Kuopio"),
    "71660": (62.6800, 27.1800, "Kuopio"),
    "71670": (62.6600, 27.1600, "Kuopio"),
    "71680": (62.6400, 27.1400, "Kuopio"),
    "71690": (62.6200, 27.1200, "Kuopio"),
    "71720": (62.9200, 27.3000, "Kuopio"),
    "71730": (62.9400, 27.2800, "Kuopio"),
    "71740": (62.9600, 27.2600, "Kuopio"),
    "71745": (62.9700, 27.2500, "Kuopio"),
    "71750": (62.9800, 27.2400, "Kuopio"),
    "71760": (62.9900, 27.2300, "Kuopio"),
    "71770": (63.0000, 27.2200, "Kuopio"),
    "71800": (62.8700, 28.0000, "Siilinjärvi"),
    "71820": (62.8800, 28.0100, "Siilinjärvi"),
    "71840": (62.8900, 28.0200, "Siilinjärvi"),
    "71850": (62.9000, 28.0300, "Siilinjärvi"),
    "71870": (62.9200, 28.0500, "Siilinjärvi"),
    "71910": (63.0500, 27.6500, "Siilinjärvi"),
    "71920": (63.0700, 27.6300, "Siilinjärvi"),
    "71940": (63.1000, 27.6000, "Siilinjärvi"),
    "71950": (63.1200, 27.5800, "Siilinjärvi"),
    "71960": (63.1400, 27.5600, "Siilinjärvi"),
    "72100": (63.2042, 27.7274, "Karttula"),
    "72210": (63.2500, 27.7000, "Tervo"),
    "72300": (63.1000, 27.4500, "Vesanto"),
    "72400": (63.0500, 27.3500, "Pielavesi"),
    "72530": (63.2000, 26.7500, "Pielavesi"),
    "72600": (63.2500, 26.5000, "Keitele"),
    "73100": (63.5500, 27.1000, "Lapinlahti"),
    "73200": (63.4000, 27.4000, "Varpaisjärvi"),
    "73300": (63.3000, 27.8000, "Nilsiä"),
    "73310": (63.3200, 27.8200, "Nilsiä"),
    "73320": (63.3400, 27.8400, "Nilsiä"),
    "73350": (63.3800, 27.8800, "Tahkovuori"),
    "73360": (63.4000, 27.9000, "Tahkovuori"),
    "73900": (63.0800, 28.3000, "Rautavaara"),
    "74100": (63.6500, 27.8000, "Iisalmi"),
    "74120": (63.5600, 27.1900, "Iisalmi"),
    "74130": (63.5700, 27.2000, "Iisalmi"),
    "74140": (63.5800, 27.2100, "Iisalmi"),
    "74150": (63.5900, 27.2200, "Iisalmi"),
    "74160": (63.6000, 27.2300, "Iisalmi"),
    "74170": (63.6100, 27.2400, "Iisalmi"),
    "77600": (62.4800, 27.2400, "Suonenjoki"),
    "77610": (62.4900, 27.2500, "Suonenjoki"),
    "77630": (62.5100, 27.2700, "Suonenjoki"),
    "77700": (62.6000, 27.4000, "Rautalampi"),
    "77800": (62.7000, 27.2000, "Leppävirta"),
    "78200": (62.5200, 27.7500, "Varkaus"),
    "78210": (62.3200, 27.8900, "Varkaus"),
    "78250": (62.3300, 27.9000, "Varkaus"),
    "78300": (62.3400, 27.9100, "Varkaus"),
    "78310": (62.3500, 27.9200, "Varkaus"),
    "78500": (62.4500, 28.0000, "Joroinen"),
    "78850": (62.4800, 28.2000, "Leppävirta"),
    "79100": (62.4874, 27.7875, "Leppävirta"),
    "76100": (62.3028, 27.1304, "Pieksämäki"),
    # Suuret kaupungit (yli 80 km)
    "00100": (60.1699, 24.9384, "Helsinki"),
    "00120": (60.1675, 24.9427, "Helsinki"),
    "00130": (60.1658, 24.9553, "Helsinki"),
    "00140": (60.1628, 24.9689, "Helsinki"),
    "00150": (60.1602, 24.9452, "Helsinki"),
    "00160": (60.1630, 24.9250, "Helsinki"),
    "00170": (60.1710, 24.9550, "Helsinki"),
    "00180": (60.1630, 24.9500, "Helsinki"),
    "00200": (60.1590, 24.9514, "Helsinki"),
    "00250": (60.1720, 24.9050, "Helsinki"),
    "00300": (60.1800, 24.9100, "Helsinki"),
    "00400": (60.2000, 24.9100, "Helsinki"),
    "00500": (60.1872, 24.9214, "Helsinki"),
    "00510": (60.1880, 24.9650, "Helsinki"),
    "00520": (60.1950, 24.9500, "Helsinki"),
    "00530": (60.1920, 24.9650, "Helsinki"),
    "00550": (60.1890, 24.9750, "Helsinki"),
    "00560": (60.2050, 24.9600, "Helsinki"),
    "00600": (60.2100, 24.9200, "Helsinki"),
    "00700": (60.2250, 24.9300, "Helsinki"),
    "00800": (60.2350, 24.9400, "Helsinki"),
    "00900": (60.2450, 24.9500, "Helsinki"),
    "00920": (60.2350, 24.9050, "Helsinki"),
    "00940": (60.2200, 24.8800, "Helsinki"),
    "00980": (60.2500, 25.0000, "Helsinki"),
    "01000": (60.2934, 25.0378, "Vantaa"),
    "02100": (60.1756, 24.8058, "Espoo"),
    "02200": (60.1850, 24.8100, "Espoo"),
    "02600": (60.2100, 24.7500, "Espoo"),
    "33100": (61.4978, 23.7610, "Tampere"),
    "33200": (61.5100, 23.7700, "Tampere"),
    "33500": (61.4850, 23.8000, "Tampere"),
    "40100": (62.2426, 25.7473, "Jyväskylä"),
    "40200": (62.2300, 25.7600, "Jyväskylä"),
    "50100": (61.6885, 27.2723, "Mikkeli"),
    "53100": (61.0587, 28.1887, "Lappeenranta"),
    "65100": (63.0951, 21.6165, "Vaasa"),
    "80100": (62.6024, 29.7636, "Joensuu"),
    "90100": (65.0121, 25.4651, "Oulu"),
    "90200": (65.0200, 25.4500, "Oulu"),
    "90500": (65.0000, 25.5000, "Oulu"),
    "96100": (66.5028, 25.7285, "Rovaniemi"),
    "96200": (66.5100, 25.7000, "Rovaniemi"),
    # Lappi
    "99100": (69.0756, 20.8150, "Kilpisjärvi"),
    "99130": (69.0450, 20.7890, "Kilpisjärvi"),
    "99300": (68.4199, 22.4898, "Muonio"),
    "99400": (68.0580, 23.5430, "Enontekiö"),
    "99490": (69.0450, 20.7890, "Kilpisjärvi"),
    "99600": (67.4458, 26.5746, "Sodankylä"),
    "99800": (68.6588, 27.5348, "Ivalo"),
    "99870": (69.0700, 27.0300, "Inari"),
    "99980": (70.0922, 27.9072, "Utsjoki"),
    "97500": (67.8062, 24.1508, "Muonio"),
    "97600": (67.7500, 24.1500, "Kittilä"),
    "97700": (67.6600, 23.6500, "Kittilä"),
    "98100": (67.4100, 26.5900, "Sodankylä"),
    "98530": (67.7390, 27.5285, "Sodankylä"),
}
