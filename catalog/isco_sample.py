# Minimal ISCO-08 extract used when the ILO CSV cannot be downloaded.
# Column layout matches the published file, with the French and Spanish titles
# left blank: code/title pairs at 0/1 (major), 4/5 (sub-major), 8/9 (minor)
# and 12/13 (unit group).
ISCO_SAMPLE_CSV = """\
ISCO08_1D_CODE,ISCO08_1D_TITLE_EN,ISCO08_1D_TITLE_FR,ISCO08_1D_TITLE_ES,ISCO08_2D_CODE,ISCO08_2D_TITLE_EN,ISCO08_2D_TITLE_FR,ISCO08_2D_TITLE_ES,ISCO08_3D_CODE,ISCO08_3D_TITLE_EN,ISCO08_3D_TITLE_FR,ISCO08_3D_TITLE_ES,ISCO08_4D_CODE,ISCO08_4D_TITLE_EN,ISCO08_4D_TITLE_FR,ISCO08_4D_TITLE_ES,ISCO08_LEVEL
1,"Managers",,,11,"Chief Executives, Senior Officials and Legislators",,,111,"Legislators and Senior Officials",,,1111,"Legislators"
1,"Managers",,,11,"Chief Executives, Senior Officials and Legislators",,,111,"Legislators and Senior Officials",,,1112,"Senior Government Officials"
1,"Managers",,,12,"Administrative and Commercial Managers",,,121,"Business Services and Administration Managers",,,1211,"Finance Managers"
2,"Professionals",,,21,"Science and Engineering Professionals",,,214,"Engineering Professionals (excluding Electrotechnology)",,,2143,"Environmental Engineers"
2,"Professionals",,,21,"Science and Engineering Professionals",,,214,"Engineering Professionals (excluding Electrotechnology)",,,2144,"Mechanical Engineers"
3,"Technicians and Associate Professionals",,,31,"Science and Engineering Associate Professionals",,,311,"Physical and Engineering Science Technicians",,,3112,"Civil Engineering Technicians"
"""
