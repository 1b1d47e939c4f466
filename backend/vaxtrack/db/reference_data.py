"""Module: reference_data.

Universal Immunization Programme catalog used to seed the ``vaccines`` and
``vaccination_schedules`` tables. Ages are days from birth.
"""

VACCINES = [
    {
        "code": "BCG",
        "name": {"en": "BCG", "hi": "बीसीजी", "te": "బీసీజీ"},
        "description": {
            "en": "Protects against severe forms of tuberculosis",
            "hi": "तपेदिक के गंभीर रूपों से बचाता है",
            "te": "క్షయ వ్యాధి తీవ్ర రూపాల నుండి రక్షిస్తుంది",
        },
        "vaccine_type": "live_attenuated",
        "route_of_administration": "intradermal",
        "contraindications": ["immunodeficiency", "hiv_symptomatic"],
        "side_effects": {"en": "Small ulcer at injection site that heals into a scar"},
    },
    {
        "code": "HEPB",
        "name": {"en": "Hepatitis B", "hi": "हेपेटाइटिस बी", "te": "హెపటైటిస్ బి"},
        "description": {
            "en": "Prevents hepatitis B liver infection",
            "hi": "हेपेटाइटिस बी यकृत संक्रमण से बचाता है",
            "te": "హెపటైటిస్ బి కాలేయ సంక్రమణను నివారిస్తుంది",
        },
        "vaccine_type": "recombinant",
        "route_of_administration": "intramuscular",
        "contraindications": ["severe_allergic_reaction"],
        "side_effects": {"en": "Soreness at injection site, mild fever"},
    },
    {
        "code": "OPV",
        "name": {"en": "Oral Polio Vaccine", "hi": "ओरल पोलियो वैक्सीन", "te": "ఓరల్ పోలియో వ్యాక్సిన్"},
        "description": {
            "en": "Protects against poliomyelitis",
            "hi": "पोलियो से बचाता है",
            "te": "పోలియో నుండి రక్షిస్తుంది",
        },
        "vaccine_type": "live_attenuated",
        "route_of_administration": "oral",
        "contraindications": ["immunodeficiency"],
        "side_effects": {"en": "Rarely, mild diarrhoea"},
    },
    {
        "code": "PENTA",
        "name": {"en": "Pentavalent (DPT-HepB-Hib)", "hi": "पेंटावेलेंट", "te": "పెంటావాలెంట్"},
        "description": {
            "en": "Diphtheria, pertussis, tetanus, hepatitis B and Hib in one injection",
            "hi": "डिप्थीरिया, काली खांसी, टिटनेस, हेपेटाइटिस बी और हिब से सुरक्षा",
            "te": "డిఫ్తీరియా, కోరింత దగ్గు, ధనుర్వాతం, హెపటైటిస్ బి మరియు హిబ్ నుండి రక్షణ",
        },
        "vaccine_type": "combination",
        "route_of_administration": "intramuscular",
        "contraindications": ["encephalopathy", "severe_allergic_reaction"],
        "side_effects": {"en": "Fever, swelling and irritability for one to two days"},
    },
    {
        "code": "ROTA",
        "name": {"en": "Rotavirus", "hi": "रोटावायरस", "te": "రోటావైరస్"},
        "description": {
            "en": "Prevents severe rotavirus diarrhoea",
            "hi": "गंभीर रोटावायरस दस्त से बचाता है",
            "te": "తీవ్రమైన రోటావైరస్ విరేచనాలను నివారిస్తుంది",
        },
        "vaccine_type": "live_attenuated",
        "route_of_administration": "oral",
        "contraindications": ["immunodeficiency", "intussusception_history"],
        "side_effects": {"en": "Mild vomiting or diarrhoea"},
    },
    {
        "code": "PCV",
        "name": {"en": "Pneumococcal Conjugate", "hi": "न्यूमोकोकल कंजुगेट", "te": "న్యుమోకోకల్ కాంజుగేట్"},
        "description": {
            "en": "Protects against pneumococcal pneumonia and meningitis",
            "hi": "न्यूमोकोकल निमोनिया और मेनिनजाइटिस से बचाता है",
            "te": "న్యుమోకోకల్ న్యుమోనియా మరియు మెనింజైటిస్ నుండి రక్షిస్తుంది",
        },
        "vaccine_type": "conjugate",
        "route_of_administration": "intramuscular",
        "contraindications": ["severe_allergic_reaction"],
        "side_effects": {"en": "Fever, tenderness at injection site"},
    },
    {
        "code": "MR",
        "name": {"en": "Measles-Rubella", "hi": "खसरा-रूबेला", "te": "మీజిల్స్-రుబెల్లా"},
        "description": {
            "en": "Protects against measles and rubella",
            "hi": "खसरा और रूबेला से बचाता है",
            "te": "మీజిల్స్ మరియు రుబెల్లా నుండి రక్షిస్తుంది",
        },
        "vaccine_type": "live_attenuated",
        "route_of_administration": "subcutaneous",
        "contraindications": ["immunodeficiency", "pregnancy"],
        "side_effects": {"en": "Mild rash or fever 7-12 days after vaccination"},
    },
    {
        "code": "TCV",
        "name": {"en": "Typhoid Conjugate", "hi": "टाइफाइड कंजुगेट", "te": "టైఫాయిడ్ కాంజుగేట్"},
        "description": {
            "en": "Protection against typhoid fever",
            "hi": "टाइफाइड बुखार से सुरक्षा",
            "te": "టైఫాయిడ్ జ్వరం నుండి రక్షణ",
        },
        "vaccine_type": "conjugate",
        "route_of_administration": "intramuscular",
        "contraindications": ["severe_allergic_reaction"],
        "side_effects": {"en": "Pain at injection site"},
    },
    {
        "code": "TD",
        "name": {"en": "Tetanus-Diphtheria", "hi": "टिटनेस-डिप्थीरिया", "te": "టెటనస్-డిఫ్తీరియా"},
        "description": {
            "en": "Tetanus and diphtheria booster for adolescents",
            "hi": "किशोरों के लिए टिटनेस और डिप्थीरिया बूस्टर",
            "te": "కిశోరవయస్కుల కోసం టెటనస్ మరియు డిఫ్తీరియా బూస్టర్",
        },
        "vaccine_type": "toxoid",
        "route_of_administration": "intramuscular",
        "contraindications": ["severe_allergic_reaction"],
        "side_effects": {"en": "Soreness at injection site"},
    },
]

# (code, dose_number, age_group, recommended, start, end, interval_from_previous, mandatory, priority)
SCHEDULES = [
    ("BCG", 1, "birth", 0, 0, 365, None, True, "high"),
    ("HEPB", 1, "birth", 0, 0, 1, None, True, "high"),
    ("OPV", 1, "birth", 0, 0, 15, None, True, "high"),
    ("OPV", 2, "6_weeks", 42, 42, 1825, 28, True, "high"),
    ("OPV", 3, "10_weeks", 70, 70, 1825, 28, True, "high"),
    ("OPV", 4, "14_weeks", 98, 98, 1825, 28, True, "high"),
    ("OPV", 5, "16_24_months", 480, 480, 730, 180, True, "medium"),
    ("PENTA", 1, "6_weeks", 42, 42, 365, None, True, "high"),
    ("PENTA", 2, "10_weeks", 70, 70, 365, 28, True, "high"),
    ("PENTA", 3, "14_weeks", 98, 98, 365, 28, True, "high"),
    ("PENTA", 4, "16_24_months", 480, 480, 730, 180, True, "medium"),
    ("PENTA", 5, "5_6_years", 1825, 1825, 2555, 365, True, "medium"),
    ("ROTA", 1, "6_weeks", 42, 42, 365, None, True, "high"),
    ("ROTA", 2, "10_weeks", 70, 70, 365, 28, True, "high"),
    ("ROTA", 3, "14_weeks", 98, 98, 365, 28, True, "high"),
    ("PCV", 1, "6_weeks", 42, 42, 365, None, True, "high"),
    ("PCV", 2, "14_weeks", 98, 98, 365, 28, True, "high"),
    ("PCV", 3, "9_months", 270, 270, 730, 56, True, "medium"),
    ("MR", 1, "9_months", 270, 270, 1825, None, True, "high"),
    ("MR", 2, "16_24_months", 480, 480, 1825, 28, True, "high"),
    ("TCV", 1, "12_months", 365, 270, None, None, False, "low"),
    ("TD", 1, "10_years", 3650, 3650, None, None, True, "medium"),
    ("TD", 2, "16_years", 5840, 5840, None, 1825, True, "medium"),
]


def check_schedule_windows() -> list[str]:
    """Return a problem description for every row whose recommended age falls outside its window."""
    problems = []
    for code, dose, _group, recommended, start, end, _interval, _mandatory, _priority in SCHEDULES:
        if recommended < start or (end is not None and recommended > end):
            problems.append(f"{code} dose {dose}: recommended day {recommended} outside [{start}, {end}]")
    return problems
