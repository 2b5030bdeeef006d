"""Built-in country option set values (in_countryos)."""

COUNTRY_OPTIONS: tuple[tuple[int, str], ...] = (
    (1, "Afghanistan"),
    (2, "Albania"),
    (3, "Algeria"),
    (4, "Andorra"),
    (5, "Angola"),
    (6, "Argentina"),
    (7, "Armenia"),
    (8, "Australia"),
    (9, "Austria"),
    (10, "Azerbaijan"),
    (11, "Bahamas"),
    (12, "Bahrain"),
    (13, "Bangladesh"),
    (14, "Barbados"),
    (15, "Belarus"),
    (16, "Belgium"),
    (17, "Belize"),
    (18, "Benin"),
    (19, "Bhutan"),
    (20, "Bolivia"),
    (21, "BosniaandHerzegovina"),
    (22, "Botswana"),
    (23, "Brazil"),
    (24, "Brunei"),
    (25, "Bulgaria"),
    (26, "BurkinaFaso"),
    (27, "Burundi"),
    (28, "CaboVerde"),
    (29, "Cambodia"),
    (30, "Cameroon"),
    (31, "Canada"),
    (32, "CentralAfricanRepublic"),
    (33, "Chad"),
    (34, "Chile"),
    (35, "China"),
    (36, "Colombia"),
    (37, "Comoros"),
    (38, "Congo"),
    (39, "CostaRica"),
    (40, "Croatia"),
    (41, "Cuba"),
    (42, "Cyprus"),
    (43, "Czechia"),
    (44, "Denmark"),
    (45, "Djibouti"),
    (46, "Dominica"),
    (47, "DominicanRepublic"),
    (48, "Ecuador"),
    (49, "Egypt"),
    (50, "ElSalvador"),
    (51, "EquatorialGuinea"),
    (52, "Eritrea"),
    (53, "Estonia"),
    (54, "Eswatini"),
    (55, "Ethiopia"),
    (56, "Fiji"),
    (57, "Finland"),
    (58, "France"),
    (59, "Gabon"),
    (60, "Gambia"),
    (61, "Georgia"),
    (62, "Germany"),
    (63, "Ghana"),
    (64, "Greece"),
    (65, "Grenada"),
    (66, "Guatemala"),
    (67, "Guinea"),
    (68, "GuineaBissau"),
    (69, "Guyana"),
    (70, "Haiti"),
    (71, "Honduras"),
    (72, "Hungary"),
    (73, "Iceland"),
    (74, "India"),
    (75, "Indonesia"),
    (76, "Iran"),
    (77, "Iraq"),
    (78, "Ireland"),
    (79, "Israel"),
    (80, "Italy"),
    (81, "Jamaica"),
    (82, "Japan"),
    (83, "Jordan"),
    (84, "Kazakhstan"),
    (85, "Kenya"),
    (86, "Kiribati"),
    (87, "NorthKorea"),
    (88, "SouthKorea"),
    (89, "Kosovo"),
    (90, "Kuwait"),
    (91, "Kyrgyzstan"),
    (92, "Laos"),
    (93, "Latvia"),
    (94, "Lebanon"),
    (95, "Lesotho"),
    (96, "Liberia"),
    (97, "Libya"),
    (98, "Liechtenstein"),
    (99, "Lithuania"),
    (100, "Luxembourg"),
    (101, "Madagascar"),
    (102, "Malawi"),
    (103, "Malaysia"),
    (104, "Maldives"),
    (105, "Mali"),
    (106, "Malta"),
    (107, "MarshallIslands"),
    (108, "Mauritania"),
    (109, "Mauritius"),
    (110, "Mexico"),
    (111, "Micronesia"),
    (112, "Moldova"),
    (113, "Monaco"),
    (114, "Mongolia"),
    (115, "Montenegro"),
    (116, "Morocco"),
    (117, "Mozambique"),
    (118, "Myanmar"),
    (119, "Namibia"),
    (120, "Nauru"),
    (121, "Nepal"),
    (122, "Netherlands"),
    (123, "NewZealand"),
    (124, "Nicaragua"),
    (125, "Niger"),
    (126, "Nigeria"),
    (127, "NorthMacedonia"),
    (128, "Norway"),
    (129, "Oman"),
    (130, "Pakistan"),
    (131, "Palau"),
    (132, "PalestineState"),
    (133, "Panama"),
    (134, "PapuaNewGuinea"),
    (135, "Paraguay"),
    (136, "Peru"),
    (137, "Philippines"),
    (138, "Poland"),
    (139, "Portugal"),
    (140, "Qatar"),
    (141, "Romania"),
    (142, "Russia"),
    (143, "Rwanda"),
    (144, "SaintKittsandNevis"),
    (145, "SaintLucia"),
    (146, "SaintVincentandtheGrenadines"),
    (147, "Samoa"),
    (148, "SanMarino"),
    (149, "SaoTomeandPrincipe"),
    (150, "SaudiArabia"),
    (151, "Senegal"),
    (152, "Serbia"),
    (153, "Seychelles"),
    (154, "SierraLeone"),
    (155, "Singapore"),
    (156, "Slovakia"),
    (157, "Slovenia"),
    (158, "SolomonIslands"),
    (159, "Somalia"),
    (160, "SouthAfrica"),
    (161, "SouthSudan"),
    (162, "Spain"),
    (163, "SriLanka"),
    (164, "Sudan"),
    (165, "Suriname"),
    (166, "Sweden"),
    (167, "Switzerland"),
    (168, "Syria"),
    (169, "Taiwan"),
    (170, "Tajikistan"),
    (171, "Tanzania"),
    (172, "Thailand"),
    (173, "TimorLeste"),
    (174, "Togo"),
    (175, "Tonga"),
    (176, "TrinidadandTobago"),
    (177, "Tunisia"),
    (178, "Turkey"),
    (179, "Turkmenistan"),
    (180, "Tuvalu"),
    (181, "Uganda"),
    (182, "Ukraine"),
    (183, "UnitedArabEmirates"),
    (184, "UnitedKingdom"),
    (185, "UnitedStatesofAmerica"),
    (186, "Uruguay"),
    (187, "Uzbekistan"),
    (188, "Vanuatu"),
    (189, "VaticanCity"),
    (190, "Venezuela"),
    (191, "Vietnam"),
    (192, "Yemen"),
    (193, "Zambia"),
    (194, "Zimbabwe"),
)
