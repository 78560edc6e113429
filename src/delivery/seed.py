"""Reference table of the 58 wilayas and their default delivery fees (DZD)."""

ALGERIAN_WILAYAS: tuple[tuple[str, str, int], ...] = (
    ("01", "Adrar", 800),
    ("02", "Chlef", 500),
    ("03", "Laghouat", 700),
    ("04", "Oum El Bouaghi", 600),
    ("05", "Batna", 650),
    ("06", "Béjaïa", 550),
    ("07", "Biskra", 700),
    ("08", "Béchar", 900),
    ("09", "Blida", 350),
    ("10", "Bouira", 400),
    ("11", "Tamanrasset", 1000),
    ("12", "Tébessa", 750),
    ("13", "Tlemcen", 600),
    ("14", "Tiaret", 550),
    ("15", "Tizi Ouzou", 450),
    ("16", "Alger", 300),
    ("17", "Djelfa", 650),
    ("18", "Jijel", 600),
    ("19", "Sétif", 550),
    ("20", "Saïda", 650),
    ("21", "Skikda", 650),
    ("22", "Sidi Bel Abbès", 600),
    ("23", "Annaba", 700),
    ("24", "Guelma", 650),
    ("25", "Constantine", 600),
    ("26", "Médéa", 450),
    ("27", "Mostaganem", 550),
    ("28", "M'Sila", 650),
    ("29", "Mascara", 600),
    ("30", "Ouargla", 800),
    ("31", "Oran", 500),
    ("32", "El Bayadh", 700),
    ("33", "Illizi", 1000),
    ("34", "Bordj Bou Arréridj", 550),
    ("35", "Boumerdès", 400),
    ("36", "El Tarf", 750),
    ("37", "Tindouf", 1000),
    ("38", "Tissemsilt", 600),
    ("39", "El Oued", 750),
    ("40", "Khenchela", 700),
    ("41", "Souk Ahras", 700),
    ("42", "Tipaza", 400),
    ("43", "Mila", 650),
    ("44", "Aïn Defla", 500),
    ("45", "Naâma", 750),
    ("46", "Aïn Témouchent", 600),
    ("47", "Ghardaïa", 750),
    ("48", "Relizane", 550),
    ("49", "Timimoun", 900),
    ("50", "Bordj Badji Mokhtar", 1000),
    ("51", "Ouled Djellal", 700),
    ("52", "Béni Abbès", 900),
    ("53", "In Salah", 1000),
    ("54", "In Guezzam", 1000),
    ("55", "Touggourt", 750),
    ("56", "Djanet", 1000),
    ("57", "El M'Ghair", 800),
    ("58", "El Meniaa", 800),
)
