"""Statically embedded vehicle reference data.

MAKES backs the make picker without any network call. FALLBACK_MODELS is
served when the remote catalog cannot answer for a make.
"""

MAKES = [
    {"id": 1, "name": "Acura"},
    {"id": 2, "name": "Audi"},
    {"id": 3, "name": "BMW"},
    {"id": 4, "name": "Buick"},
    {"id": 5, "name": "Cadillac"},
    {"id": 6, "name": "Chevrolet"},
    {"id": 7, "name": "Chrysler"},
    {"id": 8, "name": "Dodge"},
    {"id": 9, "name": "Ford"},
    {"id": 10, "name": "GMC"},
    {"id": 11, "name": "Honda"},
    {"id": 12, "name": "Hyundai"},
    {"id": 13, "name": "Infiniti"},
    {"id": 14, "name": "Jeep"},
    {"id": 15, "name": "Kia"},
    {"id": 16, "name": "Lexus"},
    {"id": 17, "name": "Lincoln"},
    {"id": 18, "name": "Mazda"},
    {"id": 19, "name": "Mercedes-Benz"},
    {"id": 20, "name": "Mitsubishi"},
    {"id": 21, "name": "Nissan"},
    {"id": 22, "name": "Porsche"},
    {"id": 23, "name": "Subaru"},
    {"id": 24, "name": "Tesla"},
    {"id": 25, "name": "Toyota"},
    {"id": 26, "name": "Volkswagen"},
    {"id": 27, "name": "Volvo"},
]

FALLBACK_MODELS = {
    "Acura": [
        (101, "TLX"),
        (102, "MDX"),
        (103, "RDX"),
        (104, "ILX"),
        (105, "NSX"),
    ],
    "Audi": [
        (111, "A4"),
        (112, "Q5"),
        (113, "A6"),
        (114, "Q7"),
        (115, "A3"),
        (116, "Q3"),
    ],
    "BMW": [
        (121, "3 Series"),
        (122, "5 Series"),
        (123, "X3"),
        (124, "X5"),
        (125, "X1"),
        (126, "7 Series"),
    ],
    "Buick": [
        (131, "Enclave"),
        (132, "Encore"),
        (133, "Envision"),
        (134, "LaCrosse"),
        (135, "Regal"),
    ],
    "Cadillac": [
        (141, "Escalade"),
        (142, "XT5"),
        (143, "CT5"),
        (144, "XT4"),
        (145, "CT4"),
    ],
    "Chevrolet": [
        (151, "Silverado 1500"),
        (152, "Equinox"),
        (153, "Malibu"),
        (154, "Traverse"),
        (155, "Tahoe"),
        (156, "Camaro"),
    ],
    "Chrysler": [
        (161, "Pacifica"),
        (162, "300"),
        (163, "Voyager"),
        (164, "Aspen"),
    ],
    "Dodge": [
        (171, "Charger"),
        (172, "Challenger"),
        (173, "Durango"),
        (174, "Journey"),
        (175, "Grand Caravan"),
    ],
    "Ford": [
        (181, "F-150"),
        (182, "Explorer"),
        (183, "Escape"),
        (184, "Mustang"),
        (185, "Edge"),
        (186, "Bronco"),
    ],
    "GMC": [
        (191, "Sierra 1500"),
        (192, "Acadia"),
        (193, "Terrain"),
        (194, "Yukon"),
        (195, "Canyon"),
    ],
    "Honda": [
        (201, "Accord"),
        (202, "Civic"),
        (203, "CR-V"),
        (204, "Pilot"),
        (205, "Odyssey"),
        (206, "HR-V"),
    ],
    "Hyundai": [
        (211, "Elantra"),
        (212, "Tucson"),
        (213, "Santa Fe"),
        (214, "Sonata"),
        (215, "Palisade"),
        (216, "Kona"),
    ],
    "Infiniti": [
        (221, "Q50"),
        (222, "QX60"),
        (223, "QX80"),
        (224, "Q60"),
        (225, "QX50"),
    ],
    "Jeep": [
        (231, "Grand Cherokee"),
        (232, "Wrangler"),
        (233, "Cherokee"),
        (234, "Compass"),
        (235, "Renegade"),
        (236, "Gladiator"),
    ],
    "Kia": [
        (241, "Optima"),
        (242, "Sorento"),
        (243, "Forte"),
        (244, "Soul"),
        (245, "Sportage"),
        (246, "Telluride"),
    ],
    "Lexus": [
        (251, "RX"),
        (252, "ES"),
        (253, "NX"),
        (254, "GX"),
        (255, "LX"),
        (256, "IS"),
    ],
    "Lincoln": [
        (261, "Navigator"),
        (262, "Aviator"),
        (263, "Corsair"),
        (264, "Nautilus"),
        (265, "Continental"),
    ],
    "Mazda": [
        (271, "CX-5"),
        (272, "Mazda3"),
        (273, "CX-9"),
        (274, "Mazda6"),
        (275, "MX-5 Miata"),
        (276, "CX-30"),
    ],
    "Mercedes-Benz": [
        (281, "C-Class"),
        (282, "E-Class"),
        (283, "GLE"),
        (284, "GLC"),
        (285, "A-Class"),
        (286, "S-Class"),
    ],
    "Mitsubishi": [
        (291, "Outlander"),
        (292, "Eclipse Cross"),
        (293, "Mirage"),
        (294, "Pajero"),
        (295, "Lancer"),
    ],
    "Nissan": [
        (301, "Altima"),
        (302, "Rogue"),
        (303, "Sentra"),
        (304, "Pathfinder"),
        (305, "Murano"),
        (306, "Frontier"),
    ],
    "Porsche": [
        (311, "Cayenne"),
        (312, "911"),
        (313, "Macan"),
        (314, "Panamera"),
        (315, "Taycan"),
        (316, "Boxster"),
    ],
    "Subaru": [
        (321, "Outback"),
        (322, "Forester"),
        (323, "Impreza"),
        (324, "Crosstrek"),
        (325, "Ascent"),
        (326, "Legacy"),
    ],
    "Tesla": [
        (331, "Model 3"),
        (332, "Model Y"),
        (333, "Model S"),
        (334, "Model X"),
        (335, "Cybertruck"),
    ],
    "Toyota": [
        (341, "Camry"),
        (342, "Corolla"),
        (343, "RAV4"),
        (344, "Highlander"),
        (345, "Prius"),
        (346, "Tacoma"),
    ],
    "Volkswagen": [
        (351, "Jetta"),
        (352, "Tiguan"),
        (353, "Passat"),
        (354, "Atlas"),
        (355, "Golf"),
        (356, "Arteon"),
    ],
    "Volvo": [
        (361, "XC90"),
        (362, "XC60"),
        (363, "S60"),
        (364, "XC40"),
        (365, "V90"),
        (366, "S90"),
    ],
}

PLACEHOLDER_MODELS = [
    (999, "Standard"),
    (998, "Deluxe"),
    (997, "Premium"),
]
