"""The fixed list of integers used as benchmark input."""

from __future__ import annotations

from sortbench.debug import IN_LEN

_VALUES: tuple[int, ...] = (
    1915, 500, 751, 1680, 818, 1075, 674, 823, 1902, 851,
    179, 115, 559, 1645, 1848, 1151, 812, 943, 402, 1475,
    1314, 338, 1027, 1974, 1421, 1852, 1081, 1007, 769, 1682,
    1599, 1008, 775, 1785, 1646, 184, 808, 1500, 1107, 304,
    1715, 1175, 2, 133, 1013, 85, 1233, 1441, 573, 1787,
    921, 523, 1595, 695, 460, 274, 12, 905, 1604, 632,
    675, 1107, 510, 262, 1301, 134, 1180, 207, 1150, 1696,
    654, 806, 1175, 688, 270, 1273, 833, 1085, 1316, 1727,
    173, 1288, 503, 401, 1800, 1458, 1446, 138, 1790, 684,
    1346, 1100, 411, 299, 1185, 1117, 473, 1645, 1923, 1647,
    219, 920, 684, 1315, 842, 165, 656, 1535, 913, 176,
    1922, 1699, 1452, 793, 1620, 477, 357, 467, 248, 1360,
    123, 224, 1678, 1070, 1429, 1665, 380, 649, 1723, 1157,
    1376, 613, 569, 1075, 1634, 773, 1776, 1683, 1475, 11,
    1913, 1303, 1199, 213, 1659, 321, 1999, 1789, 698, 203,
    1669, 696, 326, 1987, 1828, 1394, 352, 514, 770, 1317,
    1632, 1204, 105, 125, 75, 1348, 479, 345, 1334, 1662,
    1770, 506, 1013, 1220, 22, 8, 1595, 1668, 735, 1753,
    465, 506, 1821, 1714, 1601, 994, 1416, 1610, 726, 1646,
    25, 826, 115, 89, 38, 1628, 564, 808, 1061, 1728,
    1735, 960, 1706, 1019, 1761, 288, 762, 767, 778, 1481,
    1682, 1948, 1006, 159, 228, 1717, 1659, 1707, 393, 153,
    1686, 1215, 871, 1165, 1699, 1166, 954, 488, 1447, 109,
    1013, 414, 1923, 338, 754, 122, 114, 1199, 1247, 1861,
    729, 488, 1030, 1936, 967, 172, 1827, 1179, 853, 1527,
    1489, 1976, 698, 1345, 386, 1109, 1129, 1863, 1459, 1180,
    1874, 1004, 1025, 1727, 726, 867, 1793, 156, 316, 1186,
    979, 1939, 767, 1149, 1842, 1888, 1565, 1139, 542, 1322,
    887, 1731, 1272, 433, 1293, 539, 1512, 794, 15, 65,
    436, 1430, 116, 1682, 1808, 1477, 1011, 611, 140, 1577,
    1897, 897, 689, 1590, 1131, 188, 1575, 147, 369, 1317,
    780, 2000, 927, 406, 1743, 1413, 1642, 1492, 1427, 68,
    1005, 434, 1022, 388, 189, 612, 516, 1914, 1567, 656,
    261, 531, 1900, 1979, 897, 70, 886, 1340, 325, 1804,
    1870, 997, 1242, 1589, 1046, 799, 629, 1667, 362, 226,
    208, 1046, 611, 1639, 656, 878, 1777, 232, 1586, 1541,
    1756, 1151, 1434, 1120, 1718, 1812, 800, 1713, 937, 406,
    115, 1840, 145, 379, 14, 1892, 1358, 1294, 442, 215,
    128, 538, 114, 936, 115, 1064, 357, 589, 721, 1833,
    446, 1123, 1751, 530, 979, 388, 472, 1437, 1901, 1111,
    1946, 363, 955, 679, 146, 1827, 367, 1366, 482, 29,
    183, 386, 1335, 1687, 721, 301, 773, 1667, 224, 1506,
    1762, 1818, 1685, 1061, 331, 77, 1813, 1210, 427, 28,
    522, 1715, 1155, 1217, 296, 563, 1468, 1537, 117, 491,
    361, 701, 395, 487, 1905, 1292, 1501, 629, 326, 1082,
    1614, 1797, 140, 323, 796, 782, 1694, 659, 819, 323,
    1042, 336, 567, 835, 131, 1340, 1490, 1345, 512, 1479,
    1785, 406, 197, 358, 489, 1430, 1986, 1249, 1783, 1017,
    895, 1444, 853, 517, 92, 759, 1697, 1581, 716, 1371,
    1112, 1356, 192, 1946, 1509, 1646, 660, 1389, 240, 1694,
    1808, 1317, 120, 975, 1185, 319, 944, 628, 145, 1825,
    1602, 1983, 1067, 1063, 1841, 1475, 737, 1719, 1074, 769,
    1691, 392, 1519, 773, 122, 120, 1270, 798, 1134, 1019,
    13, 644, 1740, 1538, 1862, 1860, 1140, 1748, 835, 1404,
    16, 199, 1651, 199, 639, 306, 1943, 905, 1752, 1297,
    1138, 139, 1460, 677, 322, 55, 1688, 647, 129, 765,
    1766, 1425, 1510, 656, 1715, 430, 1314, 1425, 1510, 1906,
    1661, 1870, 256, 638, 567, 351, 1384, 1281, 47, 1119,
    1586, 755, 446, 339, 956, 1108, 338, 1642, 239, 1149,
    127, 1222, 236, 1878, 357, 309, 1320, 632, 867, 1184,
    1703, 1867, 1273, 1362, 325, 1771, 1321, 1677, 1369, 1206,
    1580, 1250, 1200, 362, 116, 128, 643, 66, 1396, 584,
    525, 817, 562, 701, 1877, 1999, 248, 1910, 1427, 1722,
    1919, 1416, 571, 1396, 1112, 189, 833, 1729, 1858, 1141,
    1629, 1443, 1848, 1788, 650, 295, 1989, 983, 1798, 363,
    1836, 1282, 1648, 879, 1122, 847, 1246, 337, 1000, 1400,
    1564, 289, 544, 293, 895, 34, 343, 1163, 449, 681,
    1908, 1917, 446, 1011, 92, 1218, 878, 1840, 1703, 1570,
    436, 1142, 932, 65, 1906, 754, 468, 927, 1501, 1918,
    1269, 976, 754, 230, 834, 803, 548, 1952, 336, 887,
    448, 615, 523, 651, 1313, 1018, 1319, 679, 545, 1078,
    1771, 1556, 1150, 68, 283, 1877, 921, 1698, 1345, 1748,
    1777, 351, 1587, 1197, 318, 1279, 1120, 1553, 426, 209,
    479, 561, 781, 1173, 273, 379, 1193, 33, 1601, 976,
    149, 551, 7, 1835, 868, 1571, 1881, 636, 853, 1688,
    1743, 1642, 321, 1209, 1289, 856, 998, 816, 132, 1513,
    453, 1481, 1259, 943, 905, 778, 173, 546, 1737, 472,
    259, 1953, 678, 663, 265, 1820, 504, 1206, 632, 631,
    646, 1269, 486, 1175, 965, 269, 1648, 736, 327, 1112,
    711, 174, 1260, 182, 1739, 1948, 235, 968, 1524, 1715,
    1178, 1415, 1990, 1582, 1390, 365, 1883, 1689, 1047, 1996,
    371, 68, 868, 1918, 1290, 23, 248, 1870, 281, 384,
    892, 757, 147, 1989, 1256, 860, 1223, 202, 449, 1449,
    1223, 1014, 1134, 989, 1072, 1861, 1262, 495, 679, 1764,
    862, 1259, 1919, 504, 43, 254, 853, 92, 963, 960,
    186, 345, 1580, 1821, 1421, 1435, 268, 356, 439, 444,
    983, 1924, 1483, 1639, 1088, 1132, 1942, 1100, 382, 1228,
    185, 107, 832, 672, 1716, 1906, 1579, 32, 1487, 1288,
    1197, 781, 443, 1794, 814, 327, 441, 1026, 1058, 183,
    1222, 1000, 1906, 56, 153, 1847, 234, 1639, 1581, 393,
    1758, 1576, 513, 2000, 1611, 470, 330, 116, 928, 958,
    101, 1985, 1140, 1925, 673, 1393, 1703, 747, 521, 1131,
    759, 1981, 683, 1714, 1843, 119, 1494, 1627, 1746, 178,
    910, 1590, 1524, 749, 139, 1193, 1467, 252, 481, 1726,
    1624, 1757, 1882, 998, 1127, 268, 1323, 766, 839, 1428,
    1714, 1768, 151, 1180, 598, 1376, 790, 1344, 1263, 959,
    838, 1423, 906, 823, 1660, 1837, 800, 1495, 584, 1623,
    1276, 792, 1419, 409, 239, 816, 23, 1076, 601, 1837,
    777, 814, 28, 533, 98, 1130, 1264, 1707, 363, 40,
    845, 696, 234, 1238, 5, 267, 1680, 1627, 707, 636,
)


def inputs(length: int = IN_LEN) -> list[int]:
    """Return a fresh list with the first ``length`` benchmark values.

    Raises ValueError if ``length`` is negative or larger than the data set.
    """
    if not 0 <= length <= len(_VALUES):
        raise ValueError(
            f"length must be between 0 and {len(_VALUES)}, got {length}"
        )
    return list(_VALUES[:length])