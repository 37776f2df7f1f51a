# Indian education pathways: curriculum -> stream after Class 10 -> UG -> PG -> PhD.
# Several boards reuse degree entries from CBSE under a different id, so nested
# ids are only unique within their parent list.

EXAMS = {
    "JEE_MAIN": {
        "id": "jee_main", "name": "Joint Entrance Examination Main", "short_name": "JEE Main",
        "description": "National level entrance examination for admission to B.E./B.Tech programs in NITs, IIITs and other centrally funded technical institutions; also the qualifier for JEE Advanced.",
        "level": "National", "target_stages": ["UG Engineering"],
        "typical_subjects_covered": ["Physics", "Chemistry", "Mathematics"],
        "official_website": "https://jeemain.nta.nic.in/",
    },
    "JEE_ADVANCED": {
        "id": "jee_advanced", "name": "Joint Entrance Examination Advanced", "short_name": "JEE Advanced",
        "description": "National level entrance examination for admission to undergraduate programs in the Indian Institutes of Technology (IITs).",
        "level": "National", "target_stages": ["UG Engineering (IITs)"],
        "typical_subjects_covered": ["Physics", "Chemistry", "Mathematics (Advanced)"],
        "official_website": "https://jeeadv.ac.in/",
    },
    "NEET_UG": {
        "id": "neet_ug", "name": "National Eligibility cum Entrance Test (Undergraduate)", "short_name": "NEET-UG",
        "description": "National level entrance examination for MBBS, BDS and AYUSH courses in India.",
        "level": "National", "target_stages": ["UG Medical", "UG Dental", "UG AYUSH"],
        "typical_subjects_covered": ["Physics", "Chemistry", "Biology (Botany & Zoology)"],
        "official_website": "https://neet.nta.nic.in/",
    },
    "CUET_UG": {
        "id": "cuet_ug", "name": "Common University Entrance Test (Undergraduate)", "short_name": "CUET-UG",
        "description": "National level entrance examination for undergraduate programs in Central Universities and other participating universities.",
        "level": "National", "target_stages": ["UG Arts", "UG Science", "UG Commerce", "UG Others"],
        "official_website": "https://cuet.samarth.ac.in/",
    },
    "CUET_PG": {
        "id": "cuet_pg", "name": "Common University Entrance Test (Postgraduate)", "short_name": "CUET-PG",
        "description": "National level entrance examination for postgraduate programs in Central Universities and other participating universities.",
        "level": "National", "target_stages": ["PG Arts", "PG Science", "PG Commerce", "PG Others"],
        "official_website": "https://cuet.nta.nic.in/",
    },
    "CLAT": {
        "id": "clat", "name": "Common Law Admission Test", "short_name": "CLAT",
        "description": "National level entrance examination for undergraduate and postgraduate law programs in National Law Universities.",
        "level": "National", "target_stages": ["UG Law", "PG Law"],
        "official_website": "https://consortiumofnlus.ac.in/",
    },
    "GATE": {
        "id": "gate", "name": "Graduate Aptitude Test in Engineering", "short_name": "GATE",
        "description": "National level examination of undergraduate engineering and science subjects, used for Master's admissions and some PSU recruitment.",
        "level": "National", "target_stages": ["PG Engineering/Technology", "PhD Engineering/Technology", "PSU Recruitment"],
        "official_website": "https://gate.iitk.ac.in/",
    },
    "CAT": {
        "id": "cat", "name": "Common Admission Test", "short_name": "CAT",
        "description": "National level entrance examination for MBA and postgraduate management programs in the IIMs and other business schools.",
        "level": "National", "target_stages": ["PG Management"],
        "official_website": "https://iimcat.ac.in/",
    },
    "UGC_NET": {
        "id": "ugc_net", "name": "University Grants Commission National Eligibility Test", "short_name": "UGC-NET",
        "description": "National level test for Assistant Professor eligibility and Junior Research Fellowship in Indian universities and colleges.",
        "level": "National", "target_stages": ["PhD Fellowship", "Assistant Professor Eligibility"],
        "official_website": "https://ugcnet.nta.nic.in/",
    },
    "CSIR_UGC_NET": {
        "id": "csir_ugc_net", "name": "Council of Scientific and Industrial Research UGC National Eligibility Test", "short_name": "CSIR-UGC NET",
        "description": "National level test for Junior Research Fellowship and Lectureship in science subjects.",
        "level": "National", "target_stages": ["PhD Fellowship (Science)", "Assistant Professor Eligibility (Science)"],
        "official_website": "https://csirnet.nta.nic.in/",
    },
    "NTSE": {
        "id": "ntse", "name": "National Talent Search Examination", "short_name": "NTSE",
        "description": "National scholarship program identifying talented students in Class X.",
        "level": "National", "target_stages": ["Scholarship (Class X)"],
        "typical_subjects_covered": ["Mental Ability Test (MAT)", "Scholastic Aptitude Test (SAT) - Social Science, Science, Maths"],
        "official_website": "https://ncert.nic.in/",
    },
}

NEET_PG = {
    "id": "neet_pg", "name": "National Eligibility cum Entrance Test (Postgraduate)", "short_name": "NEET-PG",
    "description": "Entrance exam for MD/MS and PG Diploma courses.",
    "level": "National", "target_stages": ["PG Medical"],
    "official_website": "https://nbe.edu.in/",
}

AISSCE = "AISSCE (All India Senior School Certificate Examination)"

BTECH_CSE = {
    "id": "be_btech_cse", "name": "B.E./B.Tech. in Computer Science & Engineering",
    "description": "Undergraduate degree focusing on computer hardware, software, networking, and AI.",
    "duration_years": 4,
    "typical_subjects_core": ["Data Structures", "Algorithms", "Operating Systems", "Database Management", "Computer Networks", "Artificial Intelligence"],
    "competitive_exams_for_ug": [EXAMS["JEE_MAIN"], EXAMS["JEE_ADVANCED"], EXAMS["CUET_UG"]],
    "pg_options": [
        {
            "id": "mtech_cse", "name": "M.Tech. in Computer Science & Engineering",
            "description": "Postgraduate specialization in advanced computer science topics.",
            "duration_years": 2,
            "typical_specializations": ["Artificial Intelligence", "Machine Learning", "Data Science", "Cybersecurity"],
            "competitive_exams_for_pg": [EXAMS["GATE"]],
            "phd_options": [
                {
                    "id": "phd_cs_ai", "name": "Ph.D. in Computer Science (Focus: AI/ML)",
                    "description": "Doctoral research in advanced areas of Artificial Intelligence and Machine Learning.",
                    "typical_duration_years_range": [3, 5],
                    "common_research_areas": ["Deep Learning", "Natural Language Processing", "Robotics", "Computer Vision"],
                    "competitive_exams_for_phd": [EXAMS["GATE"], EXAMS["UGC_NET"], EXAMS["CSIR_UGC_NET"]],
                }
            ],
        }
    ],
}

BSC_PHYSICS = {
    "id": "bsc_physics", "name": "B.Sc. (Honours) in Physics",
    "description": "Undergraduate degree focusing on fundamental principles of physics.",
    "duration_years": 3,
    "typical_subjects_core": ["Classical Mechanics", "Electromagnetism", "Quantum Mechanics", "Thermodynamics", "Optics"],
    "competitive_exams_for_ug": [EXAMS["CUET_UG"]],
    "pg_options": [
        {
            "id": "msc_physics", "name": "M.Sc. in Physics",
            "description": "Postgraduate degree for advanced study in physics.",
            "duration_years": 2,
            "typical_specializations": ["Astrophysics", "Condensed Matter Physics", "Nuclear Physics"],
            "competitive_exams_for_pg": [EXAMS["CUET_PG"], EXAMS["GATE"]],
            "phd_options": [
                {
                    "id": "phd_physics_astro", "name": "Ph.D. in Physics (Focus: Astrophysics)",
                    "description": "Doctoral research in astrophysics and cosmology.",
                    "typical_duration_years_range": [3, 5],
                    "common_research_areas": ["Stellar Evolution", "Galaxy Formation", "Cosmology"],
                    "competitive_exams_for_phd": [EXAMS["UGC_NET"], EXAMS["CSIR_UGC_NET"], EXAMS["GATE"]],
                }
            ],
        }
    ],
}

MBBS = {
    "id": "mbbs", "name": "MBBS (Bachelor of Medicine, Bachelor of Surgery)",
    "description": "Undergraduate medical degree to become a doctor.",
    "duration_years": 5.5,  # includes internship
    "typical_subjects_core": ["Anatomy", "Physiology", "Biochemistry", "Pharmacology", "Pathology"],
    "competitive_exams_for_ug": [EXAMS["NEET_UG"]],
    "pg_options": [
        {
            "id": "md_ms", "name": "MD/MS (Doctor of Medicine / Master of Surgery)",
            "description": "Postgraduate medical specialization.",
            "duration_years": 3,
            "typical_specializations": ["Cardiology", "Pediatrics", "General Surgery", "Obstetrics & Gynaecology"],
            "competitive_exams_for_pg": [NEET_PG],
        }
    ],
}

BSC_BIOTECH = {
    "id": "bsc_biotech", "name": "B.Sc. in Biotechnology",
    "description": "Undergraduate degree in the application of biological systems for technological purposes.",
    "duration_years": 3,
    "typical_subjects_core": ["Microbiology", "Genetics", "Molecular Biology", "Immunology", "Bioprocess Engineering"],
    "competitive_exams_for_ug": [EXAMS["CUET_UG"]],
    "pg_options": [
        {
            "id": "msc_biotech", "name": "M.Sc. in Biotechnology",
            "description": "Postgraduate degree for advanced study in biotechnology.",
            "duration_years": 2,
            "competitive_exams_for_pg": [EXAMS["CUET_PG"], EXAMS["GATE"]],
            "phd_options": [
                {
                    "id": "phd_biotech_pharma", "name": "Ph.D. in Biotechnology (Focus: Pharmaceutical)",
                    "description": "Doctoral research in pharmaceutical biotechnology.",
                    "typical_duration_years_range": [3, 5],
                    "common_research_areas": ["Drug Discovery", "Vaccine Development", "Biologics"],
                    "competitive_exams_for_phd": [EXAMS["UGC_NET"], EXAMS["CSIR_UGC_NET"], EXAMS["GATE"]],
                }
            ],
        }
    ],
}

BTECH_OVERSEAS = {
    "id": "btech_ib_overseas", "name": "B.Tech/B.S. (International Universities or Indian Pvt. Univ accepting IB scores)",
    "description": "Engineering or Science degrees from universities globally or Indian private universities.",
    "duration_years": 4,
    "competitive_exams_for_ug": [EXAMS["JEE_MAIN"], EXAMS["NEET_UG"]],
}

CBSE_STREAMS = [
    {
        "id": "cbse_science_mpc", "name": "Science (MPC - Maths, Physics, Chemistry)",
        "description": "Focuses on Mathematics, Physics, and Chemistry, preparing for engineering, physical sciences, and related fields.",
        "typical_subjects": ["Mathematics", "Physics", "Chemistry", "English", "Optional (e.g., Computer Science, Physical Education, Economics)"],
        "grade12_equivalent_exam_name": AISSCE,
        "competitive_exams_post10th": [EXAMS["NTSE"]],
        "ug_options": [BTECH_CSE, BSC_PHYSICS],
    },
    {
        "id": "cbse_science_bipc", "name": "Science (BiPC - Biology, Physics, Chemistry)",
        "description": "Focuses on Biology, Physics, and Chemistry, preparing for medical, biological sciences, and related fields.",
        "typical_subjects": ["Biology", "Physics", "Chemistry", "English", "Optional (e.g., Mathematics, Psychology, Physical Education)"],
        "grade12_equivalent_exam_name": AISSCE,
        "competitive_exams_post10th": [EXAMS["NTSE"]],
        "ug_options": [MBBS, BSC_BIOTECH],
    },
    {
        "id": "cbse_commerce_with_math", "name": "Commerce (with Mathematics)",
        "description": "Focuses on Accountancy, Business Studies, Economics, and Mathematics, preparing for careers in finance, business, and management.",
        "typical_subjects": ["Accountancy", "Business Studies", "Economics", "Mathematics", "English", "Optional (e.g., Entrepreneurship, Informatics Practices)"],
        "grade12_equivalent_exam_name": AISSCE,
        "competitive_exams_post10th": [EXAMS["NTSE"]],
        "ug_options": [
            {
                "id": "bcom_hons", "name": "B.Com. (Honours)",
                "description": "In-depth undergraduate degree in commerce and finance.",
                "duration_years": 3,
                "typical_subjects_core": ["Financial Accounting", "Corporate Law", "Business Statistics", "Income Tax", "Auditing"],
                "competitive_exams_for_ug": [EXAMS["CUET_UG"]],
                "pg_options": [
                    {
                        "id": "mcom", "name": "M.Com.",
                        "description": "Postgraduate degree in commerce.",
                        "duration_years": 2,
                        "typical_specializations": ["Finance", "Accounting", "International Business"],
                        "competitive_exams_for_pg": [EXAMS["CUET_PG"]],
                    },
                    {
                        "id": "mba_finance", "name": "MBA in Finance",
                        "description": "Master of Business Administration with a specialization in Finance.",
                        "duration_years": 2,
                        "competitive_exams_for_pg": [EXAMS["CAT"]],
                        "phd_options": [
                            {
                                "id": "phd_mgmt_finance", "name": "Ph.D. in Management (Focus: Finance)",
                                "description": "Doctoral research in financial management.",
                                "typical_duration_years_range": [3, 5],
                                "common_research_areas": ["Corporate Finance", "Investment Management", "Financial Markets"],
                                "competitive_exams_for_phd": [EXAMS["UGC_NET"], EXAMS["CAT"]],
                            }
                        ],
                    },
                ],
            },
            {
                "id": "bba", "name": "BBA (Bachelor of Business Administration)",
                "description": "General management undergraduate degree.",
                "duration_years": 3,
                "typical_subjects_core": ["Principles of Management", "Marketing Management", "Human Resource Management", "Financial Management"],
                "competitive_exams_for_ug": [EXAMS["CUET_UG"]],
                "pg_options": [],
            },
        ],
    },
    {
        "id": "cbse_humanities", "name": "Humanities/Arts",
        "description": "Focuses on subjects like History, Political Science, Sociology, Psychology, preparing for careers in civil services, law, journalism, academia, and social work.",
        "typical_subjects": ["History", "Political Science", "Sociology", "Psychology", "Economics", "Geography", "English", "Optional (e.g., Legal Studies, Fine Arts, Home Science)"],
        "grade12_equivalent_exam_name": AISSCE,
        "ug_options": [
            {
                "id": "ba_hons_polsci", "name": "B.A. (Honours) in Political Science",
                "description": "Undergraduate degree focusing on political systems, theories, and international relations.",
                "duration_years": 3,
                "competitive_exams_for_ug": [EXAMS["CUET_UG"]],
                "pg_options": [
                    {
                        "id": "ma_polsci", "name": "M.A. in Political Science",
                        "description": "Postgraduate degree for advanced study in political science.",
                        "duration_years": 2,
                        "competitive_exams_for_pg": [EXAMS["CUET_PG"]],
                        "phd_options": [
                            {
                                "id": "phd_polsci_ir", "name": "Ph.D. in Political Science (Focus: International Relations)",
                                "description": "Doctoral research in international relations and global politics.",
                                "typical_duration_years_range": [3, 5],
                                "common_research_areas": ["Foreign Policy Analysis", "Global Governance", "Conflict Studies"],
                                "competitive_exams_for_phd": [EXAMS["UGC_NET"]],
                            }
                        ],
                    }
                ],
            },
            {
                "id": "ba_llb", "name": "B.A. LL.B. (Honours)",
                "description": "Integrated undergraduate degree in Arts and Law.",
                "duration_years": 5,
                "competitive_exams_for_ug": [EXAMS["CLAT"]],
            },
        ],
    },
]

INDIAN_EDUCATION_SYSTEM = {
    "version": "1.0.0",
    "last_updated": "2025-01-01",
    "curricula": [
        {
            "id": "cbse", "name": "Central Board of Secondary Education", "short_name": "CBSE",
            "description": "A national level board of education in India for public and private schools, controlled and managed by the Government of India.",
            "grade10_equivalent_exam_name": "AISSE (All India Secondary School Examination)",
            "streams_after10th": CBSE_STREAMS,
        },
        {
            "id": "cisce", "name": "Council for the Indian School Certificate Examinations", "short_name": "CISCE",
            "description": "A privately held national-level board that conducts the ICSE and ISC examinations.",
            "grade10_equivalent_exam_name": "ICSE (Indian Certificate of Secondary Education)",
            "streams_after10th": [
                {
                    "id": "isc_science_pcm", "name": "ISC Science (Physics, Chemistry, Maths)",
                    "description": "Equivalent to CBSE Science MPC for ISC board.",
                    "typical_subjects": ["Physics", "Chemistry", "Mathematics", "English", "Optional"],
                    "grade12_equivalent_exam_name": "ISC (Indian School Certificate)",
                    "ug_options": [{**BTECH_CSE, "id": "be_btech_cse_isc"}],
                }
            ],
        },
        {
            "id": "ib", "name": "International Baccalaureate", "short_name": "IB",
            "description": "International programmes: Primary Years, Middle Years, Diploma and Career-related Programmes.",
            "grade10_equivalent_exam_name": "IB Middle Years Programme (MYP) Certificate (or school internal if not pursuing certificate)",
            "streams_after10th": [
                {
                    "id": "ib_dp", "name": "IB Diploma Programme (DP)",
                    "description": "A two-year pre-university course for students aged 16 to 19. Students choose subjects from six subject groups.",
                    "typical_subjects": [
                        "Group 1: Studies in Language and Literature", "Group 2: Language Acquisition",
                        "Group 3: Individuals and Societies", "Group 4: Sciences", "Group 5: Mathematics",
                        "Group 6: The Arts (or another subject from groups 1-5)", "Theory of Knowledge (TOK)",
                        "Extended Essay (EE)", "Creativity, Activity, Service (CAS)",
                    ],
                    "grade12_equivalent_exam_name": "IB Diploma",
                    "ug_options": [BTECH_OVERSEAS],
                }
            ],
        },
        {
            "id": "cambridge", "name": "Cambridge Assessment International Education", "short_name": "Cambridge",
            "description": "International programmes and qualifications for 5 to 19-year-olds, including Cambridge IGCSE and International A Level.",
            "grade10_equivalent_exam_name": "Cambridge IGCSE",
            "streams_after10th": [
                {
                    "id": "cambridge_a_levels_science", "name": "Cambridge International A Levels (Science Focus)",
                    "description": "Advanced level qualifications typically chosen in 3-4 subjects, science-focused.",
                    "typical_subjects": ["Physics (A Level)", "Chemistry (A Level)", "Mathematics (A Level)", "Further Mathematics (AS/A Level - optional)", "Biology (A Level - optional)"],
                    "grade12_equivalent_exam_name": "Cambridge International A Levels",
                    "ug_options": [{**BTECH_OVERSEAS, "id": "btech_alevel_overseas"}],
                }
            ],
        },
        {
            "id": "nios", "name": "National Institute of Open Schooling", "short_name": "NIOS",
            "description": "An open school providing education to all segments of society with the motto 'Reach Out and Reach All'.",
            "grade10_equivalent_exam_name": "NIOS Secondary Examination",
            "streams_after10th": [
                {
                    "id": "nios_senior_secondary_science", "name": "NIOS Senior Secondary (Science Subjects)",
                    "description": "Students choose a combination of subjects, can include science subjects.",
                    "typical_subjects": ["Physics", "Chemistry", "Mathematics", "Biology", "English", "etc."],
                    "grade12_equivalent_exam_name": "NIOS Senior Secondary Examination",
                    "ug_options": [
                        {**BTECH_CSE, "id": "be_btech_cse_nios"},
                        {**MBBS, "id": "mbbs_nios"},
                    ],
                }
            ],
        },
    ],
}
