"""VSOP87 coefficient tables.

Planets use the heliocentric spherical variant (VSOP87D, Bretagnon & Francou
1988, ecliptic and equinox of date) truncated at an amplitude of 1e-7 radian
or AU. The Sun uses a barycentric rectangular table laid out like VSOP87E
(J2000 ecliptic) but not taken from it: the terms are a least-squares fit,
over 1500-2500 TDB, to the mass-weighted barycentre of the eight planet
tables below after rotating them to the J2000 ecliptic. The fit follows the
barycentre to about 1e-5 AU inside that window (3.5e-6 AU at J2000) and
degrades quickly outside it.

Layout: coordinate key -> term groups ordered by ascending power of t, each
group a tuple of (A, B, C) with the term value A * cos(B + C * t), t in
Julian millennia from J2000 (TDB). Amplitudes are in radians (L, B) or AU
(R, X, Y, Z).

Regenerate with ``scripts/generate_vsop87_data.py``.
"""

MERCURY = {
    'L': (
        # L0
        (
            (4.40250710144, 0.0, 0.0),
            (0.40989414976, 1.48302034194, 26087.9031415742),
            (0.05046294199, 4.4778548954, 52175.8062831484),
            (0.00855346843, 1.16520322351, 78263.70942472259),
            (0.00165590362, 4.11969163181, 104351.61256629678),
            (0.00034561897, 0.77930765817, 130439.51570787099),
            (0.00007583476, 3.7134840051, 156527.41884944518),
            (0.0000355974, 1.51202669419, 1109.3785520934),
            (0.00001726012, 0.35832239908, 182615.32199101939),
            (0.00001803463, 4.1033317841, 5661.3320491522),
            (0.00001364682, 4.59918318745, 27197.2816936676),
            (0.00001589923, 2.99510417815, 25028.521211385),
            (0.00001017332, 0.8803143904, 31749.2351907264),
            (0.00000714182, 1.54144865265, 24978.5245894808),
            (0.00000643759, 5.30266110787, 21535.9496445154),
            (0.000004042, 3.28228847025, 208703.22513259359),
            (0.00000352441, 5.24156297101, 20426.571092422),
            (0.00000343313, 5.76531885335, 955.5997416086),
            (0.00000339214, 5.86327765, 25558.2121764796),
            (0.00000451137, 6.04989275289, 51116.4243529592),
            (0.00000325335, 1.3367433478, 53285.1848352418),
            (0.00000259587, 0.98732428184, 4551.9534970588),
            (0.00000345212, 2.79211901539, 15874.6175953632),
            (0.00000272947, 2.49451163975, 529.6909650946),
            (0.0000023483, 0.266721189, 11322.6640983044),
            (0.00000238793, 0.11343953378, 1059.3819301892),
            (0.00000264336, 3.91705094013, 57837.1383323006),
            (0.00000216645, 0.65987207348, 13521.7514415914),
            (0.00000183359, 2.62878670784, 27043.5028831828),
            (0.00000175965, 4.53636829858, 51066.427731055),
            (0.00000181629, 2.43413502466, 25661.3049506982),
            (0.00000208995, 2.09178234008, 47623.8527860896),
            (0.00000172643, 2.45200164173, 24498.8302462904),
            (0.00000142316, 3.36003948842, 37410.5672398786),
            (0.00000137942, 0.29098447849, 10213.285546211),
            (0.00000118233, 2.78149786369, 77204.32749453338),
            (0.0000009686, 6.2039820274, 234791.12827416777),
            (0.00000125219, 3.72079804425, 39609.6545831656),
            (0.00000086819, 2.64219349385, 51646.11531805379),
            (0.00000086723, 1.9595304265, 46514.4742339962),
            (0.00000088329, 5.41338795963, 26617.5941066688),
            (0.00000106422, 4.20572116254, 19804.8272915828),
            (0.00000089987, 5.85243631094, 41962.5207369374),
            (0.00000084971, 4.33100364958, 79373.08797681599),
            (0.00000069247, 4.19446437496, 19.66976089979),
            (0.00000063463, 3.14700877722, 7238.6755916),
            (0.00000068493, 0.63424819267, 83925.04147387479),
            (0.00000069729, 3.57201709671, 25132.3033999656),
            (0.00000059481, 2.74692752, 16983.9961474566),
            (0.0000006483, 0.0476292581, 33326.5787331742),
            (0.00000055376, 4.05312663019, 30639.856638633),
            (0.00000054442, 3.14331542453, 27147.28507176339),
            (0.0000004756, 5.49722099211, 3.881335358),
            (0.00000049567, 3.98985863874, 6770.7106012456),
            (0.00000056531, 5.11920557675, 73711.75592766379),
            (0.00000041764, 5.64185159566, 53131.406024757),
            (0.00000051458, 5.47786463494, 50586.73338786459),
            (0.00000044744, 1.22366857463, 77154.33087262919),
            (0.00000041882, 5.19309298528, 6283.0758499914),
            (0.00000038045, 2.43117327523, 12566.1516999828),
            (0.00000035627, 0.81390126585, 32858.61374281979),
            (0.00000048007, 5.49260554912, 51749.20809227239),
            (0.00000035392, 3.36964859355, 36301.18868778519),
            (0.00000033951, 2.78618091049, 14765.2390432698),
            (0.0000003056, 5.84045074182, 43071.8992890308),
            (0.00000035964, 1.4238083863, 2218.7571041868),
            (0.00000034044, 0.47470299167, 65697.55772473979),
            (0.000000308, 5.77017310191, 103292.23063610759),
            (0.00000028496, 0.65048992658, 426.598190876),
            (0.00000026215, 5.24158618719, 22645.32819660879),
            (0.00000026253, 0.64807043102, 1589.0728952838),
            (0.00000029538, 0.69771244088, 213.299095438),
            (0.00000027504, 0.98010127839, 45892.73043315699),
            (0.00000022347, 5.65335125838, 77734.01845962799),
            (0.00000022047, 4.93398225193, 72602.37737557039),
            (0.00000022275, 2.17909842576, 52705.49724824299),
            (0.00000024252, 4.39994170609, 7.1135470008),
            (0.00000026751, 1.06145361792, 3442.5749449654),
            (0.00000023656, 2.84168536986, 260879.03141574195),
            (0.00000022908, 2.58462026514, 68050.42387851159),
            (0.00000027086, 0.08501738669, 63498.47038145279),
            (0.00000022247, 3.22418265191, 25448.00585526019),
            (0.00000017803, 3.61202297483, 110012.94461544899),
            (0.00000022407, 1.02520094825, 105460.99111839019),
            (0.00000017576, 4.71742326981, 25874.6040461362),
            (0.00000018586, 4.52709871258, 28306.66024576099),
            (0.00000014176, 6.12394176563, 53235.18821333759),
            (0.00000014186, 5.14246797066, 26068.2333806744),
            (0.00000017244, 0.28394746813, 51220.20654153979),
            (0.00000017176, 3.26084092971, 153.7788104848),
            (0.00000014938, 1.83542009339, 99799.65906923798),
            (0.00000013387, 0.76564655407, 56727.7597802072),
            (0.00000013978, 2.30193139916, 76674.63652943878),
            (0.00000014428, 0.96646356501, 26107.57290247399),
            (0.0000001199, 6.20492907598, 18849.2275499742),
            (0.00000014381, 1.90956715654, 23969.1392811958),
            (0.00000011233, 2.04817126136, 32370.9789915656),
            (0.00000013392, 4.51750784605, 26080.78959457339),
            (0.00000011632, 2.3849686026, 79219.30916633119),
            (0.00000012412, 2.22280944169, 77837.11123384659),
            (0.00000011543, 4.17789167759, 103242.23401420339),
            (0.00000011146, 3.78292300417, 26301.2022370122),
        ),
        # L1
        (
            (26088.14706222746, 0.0, 0.0),
            (0.01126007832, 6.21703970996, 26087.9031415742),
            (0.00303471395, 3.05565472363, 52175.8062831484),
            (0.00080538452, 6.10454743366, 78263.70942472259),
            (0.00021245035, 2.83531934452, 104351.61256629678),
            (0.00005592094, 5.82675673328, 130439.51570787099),
            (0.00001472233, 2.51845458395, 156527.41884944518),
            (0.00000352244, 3.05238094403, 1109.3785520934),
            (0.00000388318, 5.48039225891, 182615.32199101939),
            (0.0000009354, 6.11791163931, 27197.2816936676),
            (0.00000090579, 0.00045481669, 24978.5245894808),
            (0.00000102743, 2.14879173777, 208703.22513259359),
            (0.00000051941, 5.62107554052, 5661.3320491522),
            (0.0000004437, 4.57348500464, 25028.521211385),
            (0.0000002807, 3.04195430989, 51066.427731055),
            (0.00000022003, 0.86475371243, 955.5997416086),
            (0.00000027295, 5.09210138837, 234791.12827416777),
            (0.00000020425, 3.71509622702, 20426.571092422),
            (0.00000020221, 0.51934047295, 21535.9496445154),
            (0.00000017496, 5.7266360862, 4551.9534970588),
            (0.0000001668, 1.35134428173, 529.6909650946),
            (0.00000015306, 1.79184360652, 11322.6640983044),
            (0.00000015398, 5.74263453989, 19.66976089979),
            (0.00000013964, 3.59426938083, 24498.8302462904),
            (0.00000012822, 2.69591798562, 53285.1848352418),
            (0.00000012621, 3.89530641889, 3.881335358),
            (0.00000012566, 4.70537436663, 1059.3819301892),
        ),
        # L2
        (
            (0.00053049845, 0.0, 0.0),
            (0.00016903658, 4.69072300649, 26087.9031415742),
            (0.00007396711, 1.34735624669, 52175.8062831484),
            (0.00003018297, 4.45643539705, 78263.70942472259),
            (0.00001107419, 1.26226537554, 104351.61256629678),
            (0.00000378173, 4.319980559, 130439.51570787099),
            (0.00000122998, 1.06868541052, 156527.41884944518),
            (0.00000038663, 4.08011610182, 182615.32199101939),
            (0.00000014898, 4.6334308581, 1109.3785520934),
            (0.00000011861, 0.79187646439, 208703.22513259359),
        ),
        # L3
        (
            (0.00000188077, 0.03466830117, 52175.8062831484),
            (0.00000142152, 3.125054526, 26087.9031415742),
            (0.00000096877, 3.00378171915, 78263.70942472259),
            (0.00000043669, 6.01867965826, 104351.61256629678),
            (0.00000035395, 0.0, 0.0),
            (0.00000018045, 2.77538373991, 130439.51570787099),
        ),
        # L4
        (
            (0.00000114078, 3.14159265359, 0.0),
        ),
        # L5
        (
            (0.00000000877, 3.14159265359, 0.0),
        ),
    ),
    'B': (
        # B0
        (
            (0.11737528962, 1.98357498767, 26087.9031415742),
            (0.02388076996, 5.03738959685, 52175.8062831484),
            (0.01222839532, 3.14159265359, 0.0),
            (0.0054325181, 1.79644363963, 78263.70942472259),
            (0.0012977877, 4.83232503961, 104351.61256629678),
            (0.00031866927, 1.58088495667, 130439.51570787099),
            (0.00007963301, 4.60972126348, 156527.41884944518),
            (0.00002014189, 1.35324164694, 182615.32199101939),
            (0.00000513953, 4.37835409309, 208703.22513259359),
            (0.00000207674, 4.91772564073, 27197.2816936676),
            (0.00000208584, 2.02020294153, 24978.5245894808),
            (0.00000132013, 1.11908492283, 234791.12827416777),
            (0.00000100454, 5.65684734206, 20426.571092422),
            (0.00000121395, 1.81271752059, 53285.1848352418),
            (0.00000091566, 2.28163128692, 25028.521211385),
            (0.00000099214, 0.09391887097, 51116.4243529592),
            (0.00000094574, 1.24184909234, 31749.2351907264),
            (0.00000078785, 4.4072588, 57837.1383323006),
            (0.00000077747, 0.52557061749, 1059.3819301892),
            (0.00000084264, 5.08510388314, 51066.427731055),
            (0.00000049948, 3.49752993688, 5661.3320491522),
            (0.00000046454, 3.23739270829, 77204.32749453338),
            (0.00000044767, 4.87849816734, 79373.08797681599),
            (0.00000040766, 2.46558332165, 46514.4742339962),
            (0.00000037378, 4.45768797944, 4551.9534970588),
            (0.00000034082, 4.14209210575, 260879.03141574195),
            (0.00000035911, 1.09057317869, 1109.3785520934),
            (0.00000031953, 1.18516389747, 83925.04147387479),
            (0.00000030954, 3.5032802721, 21535.9496445154),
            (0.00000031808, 2.41474588439, 47623.8527860896),
            (0.00000028691, 1.84828614269, 77154.33087262919),
            (0.00000025765, 2.77593370583, 27043.5028831828),
            (0.00000025199, 3.5906226646, 27147.28507176339),
            (0.00000020244, 3.06833797229, 51646.11531805379),
            (0.00000018591, 5.5842727444, 73711.75592766379),
            (0.00000016971, 0.02791276551, 103292.23063610759),
            (0.00000020099, 4.06593040301, 25132.3033999656),
            (0.00000017002, 6.13739392193, 41962.5207369374),
            (0.00000014984, 1.64717994813, 105460.99111839019),
            (0.00000014186, 0.33074185469, 10213.285546211),
            (0.00000015577, 6.07693643204, 53131.406024757),
            (0.00000015795, 3.79629547258, 529.6909650946),
            (0.00000014011, 5.52786452723, 72602.37737557039),
            (0.00000012309, 3.16626298867, 14765.2390432698),
            (0.00000011261, 0.11326534696, 13521.7514415914),
            (0.00000012448, 4.05109331029, 39609.6545831656),
            (0.00000013044, 3.48016433624, 37410.5672398786),
            (0.00000011042, 4.23192662377, 110012.94461544899),
            (0.00000011152, 0.5565846182, 63498.47038145279),
            (0.00000010717, 1.53686240986, 25661.3049506982),
            (0.00000010213, 2.87881017166, 12566.1516999828),
            (0.00000011047, 5.79741510309, 51749.20809227239),
            (0.0000001046, 5.82962163777, 50586.73338786459),
            (0.00000012866, 4.81650804018, 30639.856638633),
        ),
        # B1
        (
            (0.00429151362, 3.50169780393, 26087.9031415742),
            (0.00146233668, 3.14159265359, 0.0),
            (0.00022675295, 0.0151536688, 52175.8062831484),
            (0.00010894981, 0.48540174006, 78263.70942472259),
            (0.00006353462, 3.42943919982, 104351.61256629678),
            (0.00002495743, 0.16051210665, 130439.51570787099),
            (0.00000859585, 3.18452433647, 156527.41884944518),
            (0.00000277503, 6.21020774184, 182615.32199101939),
            (0.00000086233, 2.95244391822, 208703.22513259359),
            (0.00000026133, 5.97708962692, 234791.12827416777),
            (0.00000027696, 0.29068938889, 27197.2816936676),
            (0.00000012831, 3.37744320558, 53285.1848352418),
            (0.0000001272, 0.53792661684, 24978.5245894808),
        ),
        # B2
        (
            (0.00011830934, 4.79065585784, 26087.9031415742),
            (0.00001913516, 0.0, 0.0),
            (0.00001044801, 1.21216540536, 52175.8062831484),
            (0.00000266213, 4.43418336532, 78263.70942472259),
            (0.0000017028, 1.62255638714, 104351.61256629678),
            (0.000000963, 4.80023692017, 130439.51570787099),
            (0.00000044692, 1.60758267772, 156527.41884944518),
            (0.00000018316, 4.66904655377, 182615.32199101939),
        ),
        # B3
        (
            (0.00000235423, 0.35387524604, 26087.9031415742),
            (0.00000160537, 0.0, 0.0),
            (0.00000018904, 4.36275460261, 52175.8062831484),
        ),
        # B4
        (
            (0.00000004276, 1.74579932115, 26087.9031415742),
        ),
        # B5
        (
            (0.00000000106, 3.94555784256, 26087.9031415742),
        ),
    ),
    'R': (
        # R0
        (
            (0.39528271652, 0.0, 0.0),
            (0.07834131817, 6.19233722599, 26087.9031415742),
            (0.00795525557, 2.95989690096, 52175.8062831484),
            (0.00121281763, 6.01064153805, 78263.70942472259),
            (0.00021921969, 2.77820093975, 104351.61256629678),
            (0.00004354065, 5.82894543257, 130439.51570787099),
            (0.00000918228, 2.59650562598, 156527.41884944518),
            (0.00000260033, 3.02817753482, 27197.2816936676),
            (0.00000289955, 1.42441936951, 25028.521211385),
            (0.00000201855, 5.6472504035, 182615.32199101939),
            (0.00000201499, 5.59227724202, 31749.2351907264),
            (0.0000014198, 6.25264202645, 24978.5245894808),
            (0.00000100144, 3.73435608689, 21535.9496445154),
            (0.00000077561, 3.66972526976, 20426.571092422),
            (0.00000063277, 4.29905918105, 25558.2121764796),
            (0.00000062951, 4.76588899933, 1059.3819301892),
            (0.00000066754, 2.52520309182, 5661.3320491522),
            (0.000000755, 4.47428642962, 51116.4243529592),
            (0.00000048266, 6.06824478778, 53285.1848352418),
            (0.00000045748, 2.41480951648, 208703.22513259359),
            (0.00000035224, 1.05917802674, 27043.5028831828),
            (0.00000040815, 2.35882016415, 57837.1383323006),
            (0.00000044234, 1.21957314874, 15874.6175953632),
            (0.00000033873, 0.86381554651, 25661.3049506982),
            (0.00000037203, 0.5173382147, 47623.8527860896),
            (0.00000030092, 1.79500530627, 37410.5672398786),
            (0.00000028417, 3.02063625668, 51066.427731055),
            (0.00000030903, 0.88366335532, 24498.8302462904),
            (0.00000026105, 2.15021963174, 39609.6545831656),
            (0.00000018699, 4.96496008403, 11322.6640983044),
            (0.0000002127, 5.36857139841, 13521.7514415914),
            (0.00000019422, 4.98378647655, 10213.285546211),
            (0.00000016941, 3.88765393402, 26617.5941066688),
            (0.00000015109, 0.44510589948, 46514.4742339962),
            (0.00000017087, 1.24077764194, 77204.32749453338),
            (0.0000001394, 1.62573946865, 27147.28507176339),
            (0.00000013382, 1.07657890477, 51646.11531805379),
            (0.00000015012, 4.28173463507, 41962.5207369374),
            (0.00000013977, 4.77056848793, 33326.5787331742),
            (0.00000012794, 6.06437138766, 1109.3785520934),
            (0.00000013938, 1.99984876578, 25132.3033999656),
            (0.00000016297, 2.63293587817, 19804.8272915828),
            (0.00000011933, 2.36500939134, 4551.9534970588),
            (0.00000010612, 5.46555460932, 234791.12827416777),
            (0.00000012754, 2.07613721222, 529.6909650946),
            (0.00000012069, 2.84997619452, 79373.08797681599),
        ),
        # R1
        (
            (0.00217347739, 4.65617158663, 26087.9031415742),
            (0.00044141826, 1.42385543975, 52175.8062831484),
            (0.00010094479, 4.47466326316, 78263.70942472259),
            (0.00002432804, 1.24226083435, 104351.61256629678),
            (0.00001624367, 0.0, 0.0),
            (0.00000603996, 4.29303116561, 130439.51570787099),
            (0.00000152851, 1.0606077981, 156527.41884944518),
            (0.00000039202, 4.11136751416, 182615.32199101939),
            (0.0000001776, 4.54424653085, 27197.2816936676),
            (0.00000017999, 4.7119372581, 24978.5245894808),
            (0.00000010154, 0.87893548494, 208703.22513259359),
        ),
        # R2
        (
            (0.00003117867, 3.08231840296, 26087.9031415742),
            (0.00001245396, 6.15183317423, 52175.8062831484),
            (0.00000424822, 2.9258335296, 78263.70942472259),
            (0.0000013613, 5.97983925842, 104351.61256629678),
            (0.00000042175, 2.74936980629, 130439.51570787099),
            (0.00000021759, 3.14159265359, 0.0),
            (0.00000012793, 5.80143162209, 156527.41884944518),
        ),
        # R3
        (
            (0.00000032676, 1.67971635359, 26087.9031415742),
            (0.00000024166, 4.63403168997, 52175.8062831484),
            (0.00000012133, 1.38983781545, 78263.70942472259),
        ),
        # R4
        (
            (0.00000000394, 0.3673540384, 26087.9031415742),
        ),
    ),
}


VENUS = {
    'L': (
        # L0
        (
            (3.17614666774, 0.0, 0.0),
            (0.01353968419, 5.59313319619, 10213.285546211),
            (0.00089891645, 5.30650048468, 20426.571092422),
            (0.00005477201, 4.41630652531, 7860.4193924392),
            (0.00003455732, 2.69964470778, 11790.6290886588),
            (0.00002372061, 2.99377539568, 3930.2096962196),
            (0.00001317108, 5.18668219093, 26.2983197998),
            (0.00001664069, 4.2501893503, 1577.3435424478),
            (0.00001438322, 4.15745043958, 9683.5945811164),
            (0.00001200521, 6.15357115319, 30639.856638633),
            (0.0000076138, 1.9501470212, 529.6909650946),
            (0.00000707676, 1.06466707214, 775.522611324),
            (0.00000584836, 3.99839884762, 191.4482661116),
            (0.00000769314, 0.81629615911, 9437.762934887),
            (0.00000499915, 4.12340210074, 15720.8387848784),
            (0.00000326221, 4.59056473097, 10404.7338123226),
            (0.00000429498, 3.58642859752, 19367.1891622328),
            (0.00000326967, 5.67736583705, 5507.5532386674),
            (0.00000231937, 3.16251057072, 9153.9036160218),
            (0.00000179695, 4.65337915578, 1109.3785520934),
            (0.00000128263, 4.22604493736, 20.7753954924),
            (0.00000155464, 5.57043888948, 19651.048481098),
            (0.00000127907, 0.96209822685, 5661.3320491522),
            (0.00000105547, 1.53721191253, 801.8209311238),
            (0.00000085722, 0.35589249966, 3154.6870848956),
            (0.00000099121, 0.83288185132, 213.299095438),
            (0.00000098804, 5.39389655503, 13367.9726311066),
            (0.00000082094, 3.21596990826, 18837.49819713819),
            (0.00000088031, 3.88868860307, 9999.986450773),
            (0.00000071577, 0.11145739345, 11015.1064773348),
            (0.00000056122, 4.24039855475, 7.1135470008),
            (0.00000070239, 0.67458813282, 23581.2581773176),
            (0.00000050796, 0.24531603049, 11322.6640983044),
            (0.00000046111, 5.31576465717, 18073.7049386502),
            (0.00000044574, 6.06282201966, 40853.142184844),
            (0.00000042594, 5.3287333721, 2352.8661537718),
            (0.00000042635, 1.7995542168, 7084.8967811152),
            (0.00000041177, 0.36240972161, 382.8965322232),
            (0.00000035749, 2.70448479296, 10206.1719992102),
            (0.00000033893, 2.02347322198, 6283.0758499914),
            (0.00000029138, 3.59230925768, 22003.9146348698),
            (0.00000028479, 2.22375414002, 1059.3819301892),
            (0.0000002985, 4.02176977477, 10239.5838660108),
            (0.00000033252, 2.10025596509, 27511.4678735372),
            (0.00000030172, 4.9419191989, 13745.3462390224),
            (0.00000029252, 3.51392387787, 283.8593188652),
            (0.00000024424, 2.70177493852, 8624.2126509272),
            (0.00000020274, 3.79493637509, 14143.4952424306),
            (0.00000024322, 4.27814493315, 5.5229243074),
            (0.0000002626, 0.54067587552, 17298.1823273262),
            (0.00000020492, 0.58547075036, 38.0276726358),
            (0.00000018988, 4.13811500642, 4551.9534970588),
            (0.00000023739, 4.82870797552, 6872.6731195112),
            (0.00000015885, 1.50067222283, 8635.9420037632),
            (0.00000019069, 6.12025580313, 29050.7837433492),
            (0.00000018269, 3.04740408477, 19999.97290154599),
            (0.00000013656, 4.41336292334, 3532.0606928114),
            (0.00000017094, 3.5216152643, 31441.6775697568),
            (0.00000010955, 2.84562790076, 18307.8072320436),
            (0.00000011048, 2.58361219075, 9786.687355335),
            (0.00000010576, 0.85419784436, 10596.1820784342),
            (0.00000011599, 5.81007422699, 19896.8801273274),
            (0.00000011807, 1.91250672543, 21228.3920235458),
            (0.00000010105, 2.34270786693, 10742.9765113056),
        ),
        # L1
        (
            (10213.52943052898, 0.0, 0.0),
            (0.00095707712, 2.46424448979, 10213.285546211),
            (0.00014444977, 0.51624564679, 20426.571092422),
            (0.00000213374, 1.79547929368, 30639.856638633),
            (0.00000151669, 6.10635282369, 1577.3435424478),
            (0.00000173904, 2.65535879443, 26.2983197998),
            (0.00000082233, 5.7023413373, 191.4482661116),
            (0.00000069734, 2.68136034979, 9437.762934887),
            (0.00000052408, 3.60013087656, 775.522611324),
            (0.00000038318, 1.03379038025, 529.6909650946),
            (0.00000029633, 1.25056322354, 5507.5532386674),
            (0.00000025056, 6.10664792855, 10404.7338123226),
            (0.00000017772, 6.19369798901, 1109.3785520934),
            (0.0000001651, 2.6433045264, 7.1135470008),
            (0.0000001423, 5.45138233941, 9153.9036160218),
            (0.00000012607, 1.24464400689, 40853.142184844),
            (0.00000011627, 4.97604495371, 213.299095438),
            (0.00000012563, 1.88122199199, 382.8965322232),
        ),
        # L2
        (
            (0.00054127076, 0.0, 0.0),
            (0.0000389146, 0.34514360047, 10213.285546211),
            (0.0000133788, 2.02011286082, 20426.571092422),
            (0.00000023836, 2.04592119012, 26.2983197998),
            (0.00000019331, 3.53527371458, 30639.856638633),
        ),
        # L3
        (
            (0.00000135742, 4.80389020993, 10213.285546211),
            (0.00000077846, 3.66876371591, 20426.571092422),
            (0.00000026023, 0.0, 0.0),
        ),
        # L4
        (
            (0.00000114016, 3.14159265359, 0.0),
        ),
        # L5
        (
            (0.00000000874, 3.14159265359, 0.0),
        ),
    ),
    'B': (
        # B0
        (
            (0.05923638472, 0.26702775813, 10213.285546211),
            (0.00040107978, 1.14737178106, 20426.571092422),
            (0.00032814918, 3.14159265359, 0.0),
            (0.00001011392, 1.08946123021, 30639.856638633),
            (0.00000149458, 6.25390296069, 18073.7049386502),
            (0.00000137788, 0.86020146523, 1577.3435424478),
            (0.00000129973, 3.67152483651, 9437.762934887),
            (0.00000119507, 3.70468812804, 2352.8661537718),
            (0.00000107971, 4.53903677647, 22003.9146348698),
            (0.00000092029, 1.53954562706, 9153.9036160218),
            (0.00000052982, 2.28138172277, 5507.5532386674),
            (0.00000045617, 0.72319641722, 10239.5838660108),
            (0.00000038855, 2.93437865147, 10186.9872264112),
            (0.00000043491, 6.14015776699, 11790.6290886588),
            (0.000000417, 5.99126845246, 19896.8801273274),
            (0.00000039644, 3.86842095901, 8635.9420037632),
            (0.00000039175, 3.94960351174, 529.6909650946),
            (0.0000003332, 4.83194909595, 14143.4952424306),
            (0.00000023711, 2.90646621218, 10988.808157535),
            (0.000000235, 2.00770618322, 13367.9726311066),
            (0.00000021809, 2.69701424951, 19651.048481098),
            (0.00000020653, 0.98666685459, 775.522611324),
            (0.00000016976, 4.13711782135, 10021.8372800994),
            (0.00000017835, 5.96268643102, 25934.1243310894),
            (0.00000014949, 5.61075168206, 10404.7338123226),
            (0.00000018579, 1.80529277514, 40853.142184844),
            (0.00000015407, 3.29563855296, 11015.1064773348),
            (0.00000012936, 5.42651448496, 29580.4747084438),
            (0.00000011962, 3.57604253827, 10742.9765113056),
            (0.00000011827, 1.190709196, 8624.2126509272),
            (0.00000011466, 5.12780364967, 6283.0758499914),
            (0.00000013129, 5.70735942511, 9683.5945811164),
        ),
        # B1
        (
            (0.00513347602, 1.80364310797, 10213.285546211),
            (0.000043801, 3.38615711591, 20426.571092422),
            (0.00000196586, 2.53001197486, 30639.856638633),
            (0.00000199162, 0.0, 0.0),
            (0.00000014031, 2.27087044687, 9437.762934887),
            (0.00000012958, 1.50735622957, 18073.7049386502),
            (0.00000011941, 5.60462450426, 1577.3435424478),
            (0.00000010324, 5.24224313355, 2352.8661537718),
        ),
        # B2
        (
            (0.00022377665, 3.38509143877, 10213.285546211),
            (0.00000281739, 0.0, 0.0),
            (0.00000173164, 5.25563766915, 20426.571092422),
            (0.00000026945, 3.87040891568, 30639.856638633),
        ),
        # B3
        (
            (0.00000646671, 4.99166565277, 10213.285546211),
            (0.00000019952, 3.14159265359, 0.0),
        ),
        # B4
        (
            (0.00000014102, 0.31537190181, 10213.285546211),
        ),
        # B5
        (
            (0.00000000239, 2.05201727566, 10213.285546211),
        ),
    ),
    'R': (
        # R0
        (
            (0.72334820905, 0.0, 0.0),
            (0.00489824185, 4.02151832268, 10213.285546211),
            (0.00001658058, 4.90206728012, 20426.571092422),
            (0.00001632093, 2.84548851892, 7860.4193924392),
            (0.00001378048, 1.128465906, 11790.6290886588),
            (0.00000498399, 2.58682187717, 9683.5945811164),
            (0.00000373958, 1.42314837063, 3930.2096962196),
            (0.00000263616, 5.5293818592, 9437.762934887),
            (0.00000237455, 2.55135903978, 15720.8387848784),
            (0.00000221983, 2.01346776772, 19367.1891622328),
            (0.00000119467, 3.01975365264, 10404.7338123226),
            (0.00000125896, 2.72769833559, 1577.3435424478),
            (0.00000076178, 1.59577224486, 9153.9036160218),
            (0.00000085336, 3.98607953754, 19651.048481098),
            (0.00000074347, 4.11957854039, 5507.5532386674),
            (0.00000041904, 1.64273363458, 18837.49819713819),
            (0.00000042493, 3.81864530735, 13367.9726311066),
            (0.0000003943, 5.39019422358, 23581.2581773176),
            (0.00000029042, 5.67739528728, 5661.3320491522),
            (0.00000027555, 5.72392407794, 775.522611324),
            (0.00000027283, 4.82151812709, 11015.1064773348),
            (0.00000031274, 2.31806719544, 9999.986450773),
            (0.000000197, 4.96157560245, 11322.6640983044),
            (0.00000019809, 0.53189326492, 27511.4678735372),
            (0.00000013567, 3.75530870628, 18073.7049386502),
            (0.00000012921, 1.13381083556, 10206.1719992102),
            (0.00000016215, 0.5645383429, 529.6909650946),
            (0.00000011821, 5.09025877427, 3154.6870848956),
            (0.00000011728, 0.23432298744, 7084.8967811152),
            (0.00000013079, 5.24353197586, 17298.1823273262),
            (0.0000001318, 3.37207825651, 13745.3462390224),
            (0.00000010818, 2.45024712908, 10239.5838660108),
            (0.00000011438, 4.56838894696, 29050.7837433492),
            (0.00000010652, 1.9552839614, 31441.6775697568),
            (0.00000010357, 1.20234990061, 15874.6175953632),
        ),
        # R1
        (
            (0.00034551039, 0.89198710598, 10213.285546211),
            (0.00000234203, 1.77224942714, 20426.571092422),
            (0.00000233998, 3.14159265359, 0.0),
            (0.00000023864, 1.11274502648, 9437.762934887),
            (0.00000010568, 4.59168210921, 1577.3435424478),
        ),
        # R2
        (
            (0.00001406587, 5.0636639519, 10213.285546211),
            (0.00000015529, 5.47321687981, 20426.571092422),
            (0.00000013059, 0.0, 0.0),
        ),
        # R3
        (
            (0.00000049582, 3.2226355452, 10213.285546211),
        ),
        # R4
        (
            (0.00000000573, 0.9222969782, 10213.285546211),
        ),
    ),
}


EARTH = {
    'L': (
        # L0
        (
            (1.75347045673, 0.0, 0.0),
            (0.03341656456, 4.66925680417, 6283.0758499914),
            (0.00034894275, 4.62610241759, 12566.1516999828),
            (0.00003417571, 2.82886579606, 3.523118349),
            (0.00003497056, 2.74411800971, 5753.3848848968),
            (0.00003135896, 3.62767041758, 77713.7714681205),
            (0.00002676218, 4.41808351397, 7860.4193924392),
            (0.00002342687, 6.13516237631, 3930.2096962196),
            (0.00001273166, 2.03709655772, 529.6909650946),
            (0.00001324292, 0.74246356352, 11506.7697697936),
            (0.00000901855, 2.04505443513, 26.2983197998),
            (0.00001199167, 1.10962944315, 1577.3435424478),
            (0.00000857223, 3.50849156957, 398.1490034082),
            (0.00000779786, 1.17882652114, 5223.6939198022),
            (0.0000099025, 5.23268129594, 5884.9268465832),
            (0.00000753141, 2.53339053818, 5507.5532386674),
            (0.00000505264, 4.58292563052, 18849.2275499742),
            (0.00000492379, 4.20506639861, 775.522611324),
            (0.00000356655, 2.91954116867, 0.0673103028),
            (0.00000284125, 1.89869034186, 796.2980068164),
            (0.0000024281, 0.34481140906, 5486.777843175),
            (0.00000317087, 5.84901952218, 11790.6290886588),
            (0.00000271039, 0.31488607649, 10977.078804699),
            (0.0000020616, 4.80646606059, 2544.3144198834),
            (0.00000205385, 1.86947813692, 5573.1428014331),
            (0.00000202261, 2.45767795458, 6069.7767545534),
            (0.00000126184, 1.0830263021, 20.7753954924),
            (0.00000155516, 0.83306073807, 213.299095438),
            (0.00000115132, 0.64544911683, 0.9803210682),
            (0.00000102851, 0.63599846727, 4694.0029547076),
            (0.00000101724, 4.26679821365, 7.1135470008),
            (0.00000099206, 6.20992940258, 2146.1654164752),
            (0.00000132212, 3.41118275555, 2942.4634232916),
            (0.00000097607, 0.6810127227, 155.4203994342),
            (0.00000085128, 1.29870743025, 6275.9623029906),
            (0.00000074651, 1.75508916159, 5088.6288397668),
            (0.00000101895, 0.97569221824, 15720.8387848784),
            (0.00000084711, 3.67080093025, 71430.69561812909),
            (0.00000073547, 4.67926565481, 801.8209311238),
            (0.00000073874, 3.50319443167, 3154.6870848956),
            (0.00000078756, 3.03698313141, 12036.4607348882),
            (0.00000079637, 1.807913307, 17260.1546546904),
            (0.00000085803, 5.98322631256, 161000.6857376741),
            (0.00000056963, 2.78430398043, 6286.5989683404),
            (0.00000061148, 1.81839811024, 7084.8967811152),
            (0.00000069627, 0.83297596966, 9437.762934887),
            (0.00000056116, 4.38694880779, 14143.4952424306),
            (0.00000062449, 3.97763880587, 8827.3902698748),
            (0.00000051145, 0.28306864501, 5856.4776591154),
            (0.00000055577, 3.47006009062, 6279.5527316424),
            (0.00000041036, 5.36817351402, 8429.2412664666),
            (0.00000051605, 1.33282746983, 1748.016413067),
            (0.00000051992, 0.18914945834, 12139.5535091068),
            (0.00000049, 0.48735065033, 1194.4470102246),
            (0.000000392, 6.16832995016, 10447.3878396044),
            (0.00000035566, 1.77597314691, 6812.766815086),
            (0.0000003677, 6.04133859347, 10213.285546211),
            (0.00000036596, 2.56955238628, 1059.3819301892),
            (0.00000033291, 0.59309499459, 17789.845619785),
            (0.00000035954, 1.70876111898, 2352.8661537718),
            (0.00000040938, 2.39850881707, 19651.048481098),
            (0.00000030047, 2.73975123935, 1349.8674096588),
            (0.00000030412, 0.44294464135, 83996.84731811189),
            (0.00000023663, 0.48473567763, 8031.0922630584),
            (0.00000023574, 2.06527720049, 3340.6124266998),
            (0.00000021089, 4.14825464101, 951.7184062506),
            (0.00000024738, 0.21484762138, 3.5904286518),
            (0.00000025352, 3.16470953405, 4690.4798363586),
            (0.0000002282, 5.22197888032, 4705.7323075436),
            (0.00000021419, 1.42563735525, 16730.4636895958),
            (0.00000021891, 5.55594302562, 553.5694028424),
            (0.00000017481, 4.56052900359, 135.0650800354),
            (0.00000019925, 5.22208471269, 12168.0026965746),
            (0.0000001986, 5.77470167653, 6309.3741697912),
            (0.000000203, 0.37133792946, 283.8593188652),
            (0.00000014421, 4.19315332546, 242.728603974),
            (0.00000016225, 5.98837722564, 11769.8536931664),
            (0.00000015077, 4.19567181073, 6256.7775301916),
            (0.00000019124, 3.82219996949, 23581.2581773176),
            (0.00000018888, 5.38626880969, 149854.40013480789),
            (0.00000014346, 3.72355084422, 38.0276726358),
            (0.00000017898, 2.21490735647, 13367.9726311066),
            (0.00000012054, 2.62229588349, 955.5997416086),
            (0.00000011287, 0.17739328092, 4164.311989613),
            (0.00000013971, 4.40138139996, 6681.2248533996),
            (0.00000013621, 1.88934471407, 7632.9432596502),
            (0.00000012503, 1.13052412208, 5.5229243074),
            (0.00000010498, 5.35909518669, 1592.5960136328),
            (0.00000010327, 6.19982566125, 6438.4962494256),
            (0.00000012003, 1.003514567, 632.7837393132),
            (0.00000010827, 0.32734520222, 103.0927742186),
            (0.00000010005, 6.0291496328, 5746.271337896),
            (0.00000010523, 0.93871805506, 11926.2544136688),
        ),
        # L1
        (
            (6283.31966747491, 0.0, 0.0),
            (0.00206058863, 2.67823455584, 6283.0758499914),
            (0.0000430343, 2.63512650414, 12566.1516999828),
            (0.00000425264, 1.59046980729, 3.523118349),
            (0.00000108977, 2.96618001993, 1577.3435424478),
            (0.00000093478, 2.59212835365, 18849.2275499742),
            (0.00000119261, 5.79557487799, 26.2983197998),
            (0.00000072122, 1.13846158196, 529.6909650946),
            (0.00000067768, 1.87472304791, 398.1490034082),
            (0.00000067327, 4.40918235168, 5507.5532386674),
            (0.00000059027, 2.8879703846, 5223.6939198022),
            (0.00000055976, 2.17471680261, 155.4203994342),
            (0.00000045407, 0.39803079805, 796.2980068164),
            (0.00000036369, 0.46624739835, 775.522611324),
            (0.00000028958, 2.64707383882, 7.1135470008),
            (0.00000019097, 1.84628332577, 5486.777843175),
            (0.00000020844, 5.34138275149, 0.9803210682),
            (0.00000018508, 4.96855124577, 213.299095438),
            (0.00000016233, 0.03216483047, 2544.3144198834),
            (0.00000017293, 2.99116864949, 6275.9623029906),
            (0.00000015832, 1.43049285325, 2146.1654164752),
            (0.00000014615, 1.20532366323, 10977.078804699),
            (0.00000011877, 3.25804815607, 5088.6288397668),
            (0.00000011514, 2.07502418155, 4694.0029547076),
            (0.00000012461, 2.83432285512, 1748.016413067),
            (0.00000011808, 5.2737979048, 1194.4470102246),
            (0.00000010641, 0.76614199202, 553.5694028424),
        ),
        # L2
        (
            (0.0005291887, 0.0, 0.0),
            (0.00008719837, 1.07209665242, 6283.0758499914),
            (0.00000309125, 0.86728818832, 12566.1516999828),
            (0.00000027339, 0.05297871691, 3.523118349),
            (0.00000016334, 5.18826691036, 26.2983197998),
            (0.00000015752, 3.6845788943, 155.4203994342),
        ),
        # L3
        (
            (0.00000289226, 5.84384198723, 6283.0758499914),
            (0.00000034955, 0.0, 0.0),
            (0.00000016819, 5.48766912348, 12566.1516999828),
        ),
        # L4
        (
            (0.00000114084, 3.14159265359, 0.0),
        ),
        # L5
        (
            (0.00000000878, 3.14159265359, 0.0),
        ),
    ),
    'B': (
        # B0
        (
            (0.0000027962, 3.19870156017, 84334.66158130829),
            (0.00000101643, 5.42248619256, 5507.5532386674),
            (0.00000080445, 3.88013204458, 5223.6939198022),
            (0.00000043806, 3.70444689758, 2352.8661537718),
            (0.00000031933, 4.00026369781, 1577.3435424478),
            (0.00000022724, 3.9847383156, 1047.7473117547),
            (0.00000016392, 3.56456119782, 5856.4776591154),
            (0.00000018141, 4.98367470263, 6283.0758499914),
            (0.00000014443, 3.70275614914, 9437.762934887),
            (0.00000014304, 3.41117857525, 10213.285546211),
            (0.00000011246, 4.8282069053, 14143.4952424306),
            (0.000000109, 2.08574562327, 6812.766815086),
            (0.00000010367, 4.05663927946, 71092.88135493269),
        ),
        # B1
        (
            (0.0000000903, 3.8972906189, 5507.5532386674),
        ),
        # B2
        (
            (0.00000001662, 1.62703209173, 84334.66158130829),
        ),
    ),
    'R': (
        # R0
        (
            (1.00013988799, 0.0, 0.0),
            (0.01670699626, 3.09846350771, 6283.0758499914),
            (0.00013956023, 3.0552460962, 12566.1516999828),
            (0.0000308372, 5.19846674381, 77713.7714681205),
            (0.00001628461, 1.17387749012, 5753.3848848968),
            (0.00001575568, 2.84685245825, 7860.4193924392),
            (0.00000924799, 5.45292234084, 11506.7697697936),
            (0.00000542444, 4.56409149777, 3930.2096962196),
            (0.0000047211, 3.66100022149, 5884.9268465832),
            (0.0000032878, 5.89983646482, 5223.6939198022),
            (0.00000345983, 0.96368617687, 5507.5532386674),
            (0.00000306784, 0.29867139512, 5573.1428014331),
            (0.00000174844, 3.01193636534, 18849.2275499742),
            (0.00000243189, 4.27349536153, 11790.6290886588),
            (0.00000211829, 5.84714540314, 1577.3435424478),
            (0.00000185752, 5.02194447178, 10977.078804699),
            (0.00000109835, 5.05510636285, 5486.777843175),
            (0.00000098316, 0.88681311277, 6069.7767545534),
            (0.00000086499, 5.68959778254, 15720.8387848784),
            (0.00000085825, 1.27083733351, 161000.6857376741),
            (0.00000062916, 0.92177108832, 529.6909650946),
            (0.00000057056, 2.01374292014, 83996.84731811189),
            (0.00000064903, 0.27250613787, 17260.1546546904),
            (0.00000049384, 3.24501240359, 2544.3144198834),
            (0.00000055736, 5.24159798933, 71430.69561812909),
            (0.00000042515, 6.01110242003, 6275.9623029906),
            (0.00000046963, 2.57805070386, 775.522611324),
            (0.00000038968, 5.36071738169, 4694.0029547076),
            (0.00000044661, 5.53715807302, 9437.762934887),
            (0.0000003566, 1.67468058995, 12036.4607348882),
            (0.00000031921, 0.18368229781, 5088.6288397668),
            (0.00000031846, 1.77775642085, 398.1490034082),
            (0.00000033193, 0.24370300098, 7084.8967811152),
            (0.00000038245, 2.39255343974, 8827.3902698748),
            (0.00000028464, 1.21344868176, 6286.5989683404),
            (0.0000003749, 0.82952922332, 19651.048481098),
            (0.00000036957, 4.90107591914, 12139.5535091068),
            (0.00000034537, 1.84270693282, 2942.4634232916),
            (0.00000026275, 4.58896850401, 10447.3878396044),
            (0.00000024596, 3.78660875483, 8429.2412664666),
            (0.00000023587, 0.26866117066, 796.2980068164),
            (0.00000027793, 1.89934330904, 6279.5527316424),
            (0.00000023927, 4.99598548138, 5856.4776591154),
            (0.00000020349, 4.65267995431, 2146.1654164752),
            (0.00000023287, 2.80783650928, 14143.4952424306),
            (0.00000022103, 1.95004702988, 3154.6870848956),
            (0.00000019506, 5.38227371393, 2352.8661537718),
            (0.00000017958, 0.19871379385, 6812.766815086),
            (0.00000017174, 4.43315560735, 10213.285546211),
            (0.0000001619, 5.23160507859, 17789.845619785),
            (0.00000017314, 6.15200787916, 16730.4636895958),
            (0.00000013814, 5.18962074032, 8031.0922630584),
            (0.00000018833, 0.67306674027, 149854.40013480789),
            (0.00000018331, 2.25348733734, 23581.2581773176),
            (0.00000013641, 3.68516118804, 4705.7323075436),
            (0.00000013139, 0.65289581324, 13367.9726311066),
            (0.00000010414, 4.33285688538, 11769.8536931664),
            (0.00000010169, 1.59390681369, 4690.4798363586),
        ),
        # R1
        (
            (0.00103018608, 1.10748969588, 6283.0758499914),
            (0.00001721238, 1.06442301418, 12566.1516999828),
            (0.00000702215, 3.14159265359, 0.0),
            (0.00000032346, 1.02169059149, 18849.2275499742),
            (0.00000030799, 2.84353804832, 5507.5532386674),
            (0.00000024971, 1.31906709482, 5223.6939198022),
            (0.00000018485, 1.42429748614, 1577.3435424478),
            (0.00000010078, 5.91378194648, 10977.078804699),
        ),
        # R2
        (
            (0.00004359385, 5.78455133738, 6283.0758499914),
            (0.00000123633, 5.57934722157, 12566.1516999828),
            (0.00000012341, 3.14159265359, 0.0),
        ),
        # R3
        (
            (0.00000144595, 4.27319435148, 6283.0758499914),
        ),
        # R4
        (
            (0.00000003858, 2.56384387339, 6283.0758499914),
        ),
        # R5
        (
            (0.00000000086, 1.21579741687, 6283.0758499914),
        ),
    ),
}


MARS = {
    'L': (
        # L0
        (
            (6.20347711583, 0.0, 0.0),
            (0.186563681, 5.05037100303, 3340.6124266998),
            (0.01108216792, 5.40099836958, 6681.2248533996),
            (0.00091798394, 5.75478745111, 10021.8372800994),
            (0.00027744987, 5.97049512942, 3.523118349),
            (0.0001061023, 2.93958524973, 2281.2304965106),
            (0.00012315897, 0.84956081238, 2810.9214616052),
            (0.00008926772, 4.15697845939, 0.0172536522),
            (0.00008715688, 6.11005159792, 13362.4497067992),
            (0.00006797552, 0.36462243626, 398.1490034082),
            (0.00007774867, 3.33968655074, 5621.8429232104),
            (0.00003575079, 1.66186540141, 2544.3144198834),
            (0.00004161101, 0.2281497533, 2942.4634232916),
            (0.0000307525, 0.85696597082, 191.4482661116),
            (0.00002628122, 0.6480614357, 3337.0893083508),
            (0.00002937543, 6.07893711408, 0.0673103028),
            (0.0000238942, 5.03896401349, 796.2980068164),
            (0.00002579842, 0.02996706197, 3344.1355450488),
            (0.0000152814, 1.14979306228, 6151.533888305),
            (0.00001798808, 0.65634026844, 529.6909650946),
            (0.00001264356, 3.62275092231, 5092.1519581158),
            (0.00001286232, 3.06795924626, 2146.1654164752),
            (0.00001546408, 2.91579633392, 1751.539531416),
            (0.00001024907, 3.69334293555, 8962.4553499102),
            (0.00000891567, 0.1829389909, 16703.062133499),
            (0.0000085876, 2.40093704204, 2914.0142358238),
            (0.00000832718, 2.46418591282, 3340.5951730476),
            (0.00000832724, 4.49495753458, 3340.629680352),
            (0.00000712899, 3.66336014788, 1059.3819301892),
            (0.00000748724, 3.82248399468, 155.4203994342),
            (0.00000723863, 0.67497565801, 3738.761430108),
            (0.00000635557, 2.92182704275, 8432.7643848156),
            (0.00000655163, 0.48864075176, 3127.3133312618),
            (0.00000550472, 3.81001205408, 0.9803210682),
            (0.00000552746, 4.47478863016, 1748.016413067),
            (0.00000425972, 0.55365138172, 6283.0758499914),
            (0.00000415132, 0.49662314774, 213.299095438),
            (0.00000472164, 3.6254781941, 1194.4470102246),
            (0.00000306552, 0.38052862973, 6684.7479717486),
            (0.00000312141, 0.99853322843, 6677.7017350506),
            (0.00000293199, 4.22131277914, 20.7753954924),
            (0.00000302377, 4.48618150321, 3532.0606928114),
            (0.00000274028, 0.54222141841, 3340.545116397),
            (0.00000281073, 5.88163372945, 1349.8674096588),
            (0.00000231185, 1.28240685294, 3870.3033917944),
            (0.000002836, 5.76885494123, 3149.1641605882),
            (0.00000236114, 5.75504515576, 3333.498879699),
            (0.00000274035, 0.13372501211, 3340.6797370026),
            (0.00000299396, 2.78323705697, 6254.6266625236),
            (0.00000204161, 2.82133266185, 1221.8485663214),
            (0.00000238857, 5.37155471672, 4136.9104335162),
            (0.00000188639, 1.49103016486, 9492.1463150048),
            (0.00000221225, 3.50466672203, 382.8965322232),
            (0.00000179196, 1.00561112574, 951.7184062506),
            (0.0000017211, 0.43943041719, 5486.777843175),
            (0.00000193126, 3.35715137745, 3.5904286518),
            (0.00000144305, 1.41874193418, 135.0650800354),
            (0.00000160011, 3.94854735192, 4562.4609930212),
            (0.00000174068, 2.41360332576, 553.5694028424),
            (0.00000130993, 4.04491720264, 12303.06777661),
            (0.00000138245, 4.30145176915, 7.1135470008),
            (0.00000128062, 1.80665643332, 5088.6288397668),
            (0.00000139897, 3.32592516164, 2700.7151403858),
            (0.00000128102, 2.20806651008, 1592.5960136328),
            (0.00000116945, 3.12805282207, 7903.073419721),
            (0.00000110375, 1.05195079687, 242.728603974),
            (0.00000113486, 3.70070798123, 1589.0728952838),
            (0.0000010009, 3.24343740861, 11773.3768115154),
            (0.00000095592, 0.53954181149, 20043.6745601988),
            (0.00000098947, 4.8455829474, 6681.2421070518),
            (0.00000104541, 0.78535382076, 8827.3902698748),
            (0.00000084187, 3.9897072073, 4399.994356889),
            (0.00000086931, 2.20186740523, 11243.6858464208),
            (0.00000071437, 2.80307550016, 3185.1920272656),
            (0.00000072091, 5.84672102525, 5884.9268465832),
            (0.00000073476, 2.18428012567, 8429.2412664666),
            (0.00000098946, 2.81481140371, 6681.2075997474),
            (0.00000068414, 2.73834914412, 2288.3440435114),
            (0.00000086751, 1.02092221563, 7079.3738568078),
            (0.0000006532, 2.68118597578, 28.4491874678),
            (0.00000083749, 3.2025613099, 4690.4798363586),
            (0.00000075034, 0.76643418252, 6467.9257579616),
            (0.00000068984, 3.76399731788, 6041.3275670856),
            (0.00000066706, 0.73630620766, 3723.508958923),
            (0.00000063314, 4.5277147047, 426.598190876),
            (0.00000061683, 6.16831509419, 2274.1169495098),
            (0.00000052256, 0.89941531307, 9623.6882766912),
            (0.00000055488, 4.6062546702, 4292.3308329504),
            (0.00000051332, 4.14823636534, 3341.592747768),
            (0.00000056629, 5.06250410206, 15.252471185),
            (0.00000063376, 0.91296240798, 3553.9115221378),
            (0.00000045829, 0.78784235062, 1990.745017041),
            (0.00000048542, 3.95670418719, 4535.0594369244),
            (0.00000041223, 6.02019329922, 3894.1818295422),
            (0.00000041939, 3.58326425115, 8031.0922630584),
            (0.00000056396, 1.68727150304, 6872.6731195112),
            (0.00000055909, 3.46260833495, 263.0839233728),
            (0.00000051678, 2.81307492682, 3339.6321056316),
            (0.00000040671, 3.13832621829, 9595.2390892234),
            (0.00000038107, 0.7340194632, 10025.3603984484),
            (0.00000039495, 5.6322539216, 3097.88382272579),
            (0.00000044174, 3.19529736702, 5628.9564702112),
            (0.00000036716, 2.63720775102, 692.1576012268),
            (0.00000045905, 0.28718981497, 5614.7293762096),
            (0.00000038352, 5.82880707426, 3191.0492295652),
            (0.00000038206, 2.34835984063, 162.4666361322),
            (0.00000032562, 0.48400659333, 6681.2921637024),
            (0.00000037135, 0.68508150774, 2818.035008606),
            (0.00000031168, 3.98160912982, 20.3553193988),
            (0.00000032561, 0.89250316888, 6681.1575430968),
            (0.00000037752, 4.15482955299, 2803.8079146044),
            (0.00000033626, 6.11992401052, 6489.776587288),
            (0.00000029007, 2.42707385674, 3319.8370312074),
            (0.0000003879, 1.35198498795, 10018.3141617504),
            (0.00000033148, 1.14023770004, 5.5229243074),
            (0.00000027584, 1.59691203058, 7210.9158184942),
            (0.00000028686, 5.72055456734, 7477.522860216),
            (0.00000034031, 2.59544082509, 11769.8536931664),
            (0.0000002538, 0.52093116112, 10.6366653498),
            (0.00000026357, 1.34532646574, 3496.032826134),
            (0.00000024554, 4.00323183088, 11371.7046897582),
            (0.00000025637, 0.2496352342, 522.5774180938),
            (0.00000027278, 4.55645328122, 3361.3878221922),
            (0.00000023764, 1.84058377256, 12832.7587417046),
            (0.00000022816, 3.52628212106, 1648.4467571974),
            (0.00000022274, 0.72106133721, 266.6070417218),
            (0.00000021202, 3.11824472284, 2957.7158944766),
            (0.00000020158, 3.67131504946, 1758.6530784168),
            (0.0000002153, 6.15388757177, 3264.3463554242),
            (0.00000020093, 1.08247416065, 7064.1213856228),
            (0.00000021343, 4.28218757863, 4032.7700279266),
            (0.0000002754, 6.08389942337, 6674.1113063988),
            (0.00000019849, 2.37668920745, 10713.9948813262),
            (0.00000025512, 3.43242352804, 3443.7052009184),
            (0.00000022542, 5.64861703438, 2388.8940204492),
            (0.00000024378, 0.96994696413, 632.7837393132),
            (0.00000023079, 4.74990214223, 3347.7259737006),
            (0.00000017709, 3.69742343974, 3344.2028553516),
            (0.00000022662, 3.95446324417, 4989.0591838972),
            (0.00000022604, 5.24082917494, 3205.5473466644),
            (0.00000016811, 5.48619684111, 3.881335358),
            (0.00000018422, 4.22535881468, 2787.0430238574),
            (0.00000022737, 4.98520896596, 7632.9432596502),
            (0.00000016648, 2.52823633184, 14584.2982731206),
            (0.00000020963, 4.27878216453, 5099.2655051166),
            (0.00000016042, 1.76786752521, 3475.6775067352),
            (0.00000015816, 3.13240869691, 59.3738619136),
            (0.00000018113, 3.25756020453, 3337.021998048),
            (0.00000019295, 3.23911854642, 7.046236698),
            (0.00000016772, 4.3973150711, 15643.6802033098),
            (0.00000017555, 4.09197396097, 74.7815985673),
            (0.00000013704, 2.5411701816, 4933.2084403326),
            (0.00000016011, 1.54669633224, 14054.607308026),
            (0.00000013547, 4.04152185347, 4929.6853219836),
            (0.00000014566, 3.45210993051, 7373.3824546264),
            (0.00000013926, 5.40797129468, 10973.55568635),
            (0.00000014246, 0.59808746067, 23.8784377478),
            (0.00000014023, 1.44218648988, 10404.7338123226),
            (0.00000016051, 3.79409950488, 2118.7638603784),
            (0.00000013714, 3.59050634457, 15113.9892382152),
            (0.00000018038, 4.25391532, 2487.4160449478),
            (0.00000015846, 0.56901288692, 103.0927742186),
            (0.00000013403, 5.16920432994, 10213.285546211),
            (0.00000016069, 2.36895958451, 3265.8308281325),
            (0.00000012773, 0.10483085657, 7234.794256242),
            (0.00000012199, 1.73079687044, 36.0278666774),
            (0.00000012283, 5.19940030635, 10021.8545337516),
            (0.00000011945, 5.47997890162, 2921.1277828246),
            (0.0000001189, 4.76593905835, 5828.0284716476),
            (0.00000012283, 3.16862882612, 10021.8200264472),
            (0.00000013274, 6.1780690534, 1744.4259844152),
            (0.00000011777, 5.727315509, 0.42007609361),
            (0.0000001234, 2.52146766331, 2906.900688823),
            (0.00000014458, 4.38010658432, 316.3918696566),
            (0.00000010639, 3.45016942919, 639.897286314),
            (0.00000010925, 0.60397688999, 5085.038411115),
            (0.00000010645, 5.47696728127, 419.4846438752),
            (0.00000010797, 1.37191539718, 10419.9862835076),
            (0.00000010565, 1.09061610786, 12168.0026965746),
            (0.00000012733, 1.79883375851, 13745.3462390224),
            (0.00000012156, 4.42295240981, 14712.317116458),
            (0.00000010685, 4.33894776374, 7740.6067835888),
            (0.00000010041, 1.3829466683, 3583.3410306738),
            (0.00000010585, 0.89641284928, 23384.2869868986),
        ),
        # L1
        (
            (3340.85627474342, 0.0, 0.0),
            (0.01458227051, 3.60426053609, 3340.6124266998),
            (0.00164901343, 3.92631250962, 6681.2248533996),
            (0.00019963338, 4.2659406103, 10021.8372800994),
            (0.00003452399, 4.73210386365, 3.523118349),
            (0.0000248548, 4.61277567318, 13362.4497067992),
            (0.00000841551, 4.45858256765, 2281.2304965106),
            (0.00000537566, 5.01589727492, 398.1490034082),
            (0.00000521041, 4.99422678175, 3344.1355450488),
            (0.00000432614, 2.5606640286, 191.4482661116),
            (0.00000429656, 5.31646162367, 155.4203994342),
            (0.00000381747, 3.53881289437, 796.2980068164),
            (0.00000314129, 4.96335266049, 16703.062133499),
            (0.00000282804, 3.15967518204, 2544.3144198834),
            (0.00000205664, 4.5689145566, 2146.1654164752),
            (0.00000168805, 1.32894813366, 3337.0893083508),
            (0.00000157587, 4.18501035954, 1751.539531416),
            (0.00000133686, 2.23325104196, 0.9803210682),
            (0.00000116561, 2.21347652545, 1059.3819301892),
            (0.00000117591, 6.02407213861, 6151.533888305),
            (0.00000113595, 5.42803224317, 3738.761430108),
            (0.00000133563, 5.97421903927, 1748.016413067),
            (0.00000091098, 1.09627836591, 1349.8674096588),
            (0.00000083301, 5.29636626272, 6684.7479717486),
            (0.00000113876, 2.12869455089, 1194.4470102246),
            (0.00000080776, 4.42813405865, 529.6909650946),
            (0.00000079531, 2.2486426633, 8962.4553499102),
            (0.00000072505, 5.8420816324, 242.728603974),
            (0.00000072946, 2.50189460554, 951.7184062506),
            (0.00000071487, 3.85636094435, 2914.0142358238),
            (0.00000085342, 3.90854841008, 553.5694028424),
            (0.00000067582, 5.02327686473, 382.8965322232),
            (0.00000065089, 1.01802439311, 3340.5951730476),
            (0.00000065089, 3.04879603978, 3340.629680352),
            (0.00000061508, 4.151831598, 3149.1641605882),
            (0.00000048477, 4.87362121538, 213.299095438),
            (0.00000046584, 1.31452419914, 3185.1920272656),
            (0.0000005652, 3.8881369932, 4136.9104335162),
            (0.00000047613, 1.18238046057, 3333.498879699),
            (0.00000041343, 0.71385375517, 1592.5960136328),
            (0.00000040055, 5.31611875491, 20043.6745601988),
            (0.00000040272, 2.72542480614, 7.1135470008),
            (0.00000032886, 5.41067411968, 6283.0758499914),
            (0.00000028244, 0.04534124888, 9492.1463150048),
            (0.00000022294, 5.88516997273, 3870.3033917944),
            (0.00000022431, 5.46592525433, 20.3553193988),
            (0.00000022612, 0.83775884934, 3097.88382272579),
            (0.00000021418, 5.37934044204, 3340.545116397),
            (0.00000023335, 6.16762213077, 3532.0606928114),
            (0.00000026579, 3.88960724782, 1221.8485663214),
            (0.00000022797, 1.54504711003, 2274.1169495098),
            (0.00000020431, 2.36353950189, 1589.0728952838),
            (0.00000020186, 3.36375535766, 5088.6288397668),
            (0.00000026554, 5.11271747607, 2700.7151403858),
            (0.00000019675, 2.57805423988, 12303.06777661),
            (0.00000019468, 0.49216434489, 6677.7017350506),
            (0.00000021104, 3.52525428062, 15.252471185),
            (0.00000021425, 4.97081508139, 3340.6797370026),
            (0.00000018505, 5.57863503922, 1990.745017041),
            (0.00000017811, 6.12537931996, 4292.3308329504),
            (0.00000016472, 2.60291845066, 3341.592747768),
            (0.00000016599, 1.25519718278, 3894.1818295422),
            (0.00000019455, 2.53112676345, 4399.994356889),
            (0.00000015, 1.03464802434, 2288.3440435114),
            (0.00000020029, 4.73119428749, 4690.4798363586),
            (0.00000015381, 2.4700947035, 4535.0594369244),
            (0.00000019964, 5.78652958398, 7079.3738568078),
            (0.00000015307, 2.26515985343, 3723.508958923),
            (0.00000014705, 3.36979890389, 6681.2421070518),
            (0.00000013535, 2.1233441041, 5486.777843175),
            (0.0000001295, 5.61929676688, 10025.3603984484),
            (0.00000012682, 2.95022113262, 3496.032826134),
            (0.00000013644, 1.97739547259, 5614.7293762096),
            (0.00000013013, 1.51424752315, 5628.9564702112),
            (0.00000014705, 1.33902715586, 6681.2075997474),
            (0.00000011353, 6.23438193885, 135.0650800354),
            (0.00000013275, 3.42243595774, 5621.8429232104),
            (0.00000010867, 5.28184140482, 2818.035008606),
            (0.0000001185, 3.12701832949, 426.598190876),
            (0.00000010472, 2.73581537999, 2787.0430238574),
            (0.00000011132, 5.84178807242, 2803.8079146044),
            (0.00000011764, 2.58551521265, 8432.7643848156),
            (0.00000011854, 5.4763068691, 3553.9115221378),
            (0.00000010958, 4.15771850822, 2388.8940204492),
        ),
        # L2
        (
            (0.00058015791, 2.04979463279, 3340.6124266998),
            (0.00054187645, 0.0, 0.0),
            (0.00013908426, 2.45742359888, 6681.2248533996),
            (0.00002465104, 2.80000020929, 10021.8372800994),
            (0.00000398379, 3.14118428289, 13362.4497067992),
            (0.00000222022, 3.19436080019, 3.523118349),
            (0.00000120957, 0.54325292454, 155.4203994342),
            (0.00000061517, 3.48529427371, 16703.062133499),
            (0.00000053638, 3.54191121461, 3344.1355450488),
            (0.00000034268, 6.00188499119, 2281.2304965106),
            (0.00000031665, 4.14015171788, 191.4482661116),
            (0.00000029839, 1.99870679845, 796.2980068164),
            (0.00000023168, 4.33403365928, 242.728603974),
            (0.00000021659, 3.44532466378, 398.1490034082),
            (0.00000016044, 6.11000472441, 2146.1654164752),
            (0.0000002037, 5.421913754, 553.5694028424),
            (0.00000014927, 6.09541783564, 3185.1920272656),
            (0.00000016227, 0.65678953303, 0.9803210682),
            (0.00000014317, 2.61851897591, 1349.8674096588),
            (0.00000014416, 4.01923812101, 951.7184062506),
            (0.00000011934, 3.86122163021, 6684.7479717486),
            (0.00000015648, 1.2208612194, 1748.016413067),
            (0.0000001126, 4.71822363671, 2544.3144198834),
            (0.00000013352, 0.60189008414, 1194.4470102246),
            (0.00000010396, 0.25038714677, 382.8965322232),
        ),
        # L3
        (
            (0.00001482423, 0.44434694876, 3340.6124266998),
            (0.00000662095, 0.88469178686, 6681.2248533996),
            (0.00000188268, 1.28799982497, 10021.8372800994),
            (0.00000041474, 1.64850786997, 13362.4497067992),
            (0.00000022661, 2.05267665262, 155.4203994342),
            (0.00000025994, 0.0, 0.0),
            (0.00000010454, 1.58006906385, 3.523118349),
        ),
        # L4
        (
            (0.00000113969, 3.14159265359, 0.0),
            (0.00000028725, 5.63662412043, 6681.2248533996),
            (0.00000024447, 5.13868481454, 3340.6124266998),
            (0.00000011187, 6.03161074431, 10021.8372800994),
        ),
        # L5
        (
            (0.0000000071, 4.04089996521, 6681.2248533996),
        ),
    ),
    'B': (
        # B0
        (
            (0.03197134986, 3.76832042432, 3340.6124266998),
            (0.00298033234, 4.10616996243, 6681.2248533996),
            (0.00289104742, 0.0, 0.0),
            (0.00031365538, 4.44651052853, 10021.8372800994),
            (0.000034841, 4.78812547889, 13362.4497067992),
            (0.00000442999, 5.65233015876, 3337.0893083508),
            (0.00000443401, 5.02642620491, 3344.1355450488),
            (0.00000399109, 5.130568147, 16703.062133499),
            (0.00000292506, 3.79290644595, 2281.2304965106),
            (0.00000181982, 6.13648011704, 6151.533888305),
            (0.00000163159, 4.26399626634, 529.6909650946),
            (0.00000159678, 2.23194610246, 1059.3819301892),
            (0.00000139323, 2.41796344238, 8962.4553499102),
            (0.00000149297, 2.16501209917, 5621.8429232104),
            (0.00000142686, 1.1821501611, 3340.5951730476),
            (0.00000142685, 3.2129218082, 3340.629680352),
            (0.00000082544, 5.36667872319, 6684.7479717486),
            (0.0000007364, 5.09187524843, 398.1490034082),
            (0.0000007266, 5.53775710437, 6283.0758499914),
            (0.00000086377, 5.74429648412, 3738.761430108),
            (0.00000083276, 5.98866315739, 6677.7017350506),
            (0.00000060116, 3.67960808826, 796.2980068164),
            (0.00000063111, 0.73049113369, 5884.9268465832),
            (0.00000062338, 4.85071999184, 2942.4634232916),
            (0.00000046951, 5.54339723804, 3340.545116397),
            (0.00000046953, 5.13486627234, 3340.6797370026),
            (0.0000004663, 5.47361665459, 20043.6745601988),
            (0.00000045588, 2.13262507507, 2810.9214616052),
            (0.00000041269, 0.20003189001, 9492.1463150048),
            (0.00000047199, 4.52184736343, 3149.1641605882),
            (0.0000003854, 4.08008443274, 4136.9104335162),
            (0.00000033069, 4.06581918329, 1751.539531416),
            (0.00000029694, 5.92218297386, 3532.0606928114),
            (0.00000032736, 2.62071056958, 2914.0142358238),
            (0.00000029521, 2.75342566734, 12303.06777661),
            (0.00000028169, 2.06282533993, 5486.777843175),
            (0.00000028618, 4.94710527914, 3870.3033917944),
            (0.00000026603, 3.5508584402, 6681.2421070518),
            (0.00000026603, 1.52008675291, 6681.2075997474),
            (0.00000023336, 2.27624532707, 1589.0728952838),
            (0.00000026052, 2.60064548916, 4399.994356889),
            (0.00000022637, 2.27507466406, 1194.4470102246),
            (0.00000018887, 6.04416196149, 7079.3738568078),
            (0.00000014846, 3.41358603159, 5088.6288397668),
            (0.00000019947, 2.67365368471, 8432.7643848156),
            (0.00000014682, 5.89211938785, 9623.6882766912),
            (0.00000014152, 2.42512744356, 3333.498879699),
            (0.0000001331, 2.62839773036, 426.598190876),
            (0.00000014008, 1.67425558329, 6254.6266625236),
            (0.00000015104, 2.81013535571, 3496.032826134),
            (0.00000013011, 5.70759434129, 10025.3603984484),
            (0.0000001208, 1.51804981987, 3185.1920272656),
            (0.00000013183, 0.04521207632, 10018.3141617504),
            (0.00000011554, 5.5741897182, 191.4482661116),
            (0.00000011196, 0.55829576311, 5092.1519581158),
            (0.0000001153, 2.13314819584, 11773.3768115154),
            (0.00000010435, 5.72414012635, 6467.9257579616),
        ),
        # B1
        (
            (0.00350068845, 5.36847836211, 3340.6124266998),
            (0.0001411603, 3.14159265359, 0.0),
            (0.00009670755, 5.47877786506, 6681.2248533996),
            (0.00001471918, 3.20205766795, 10021.8372800994),
            (0.00000425864, 3.40843812875, 13362.4497067992),
            (0.00000102039, 0.77617286189, 3337.0893083508),
            (0.00000078848, 3.71768293865, 16703.062133499),
            (0.00000026171, 2.48293558065, 2281.2304965106),
            (0.00000032708, 3.45803723682, 5621.8429232104),
            (0.00000020712, 1.44120802297, 6151.533888305),
            (0.00000018294, 6.03102943125, 529.6909650946),
            (0.0000001568, 3.93075566599, 8962.4553499102),
            (0.00000016975, 4.81115186866, 3344.1355450488),
            (0.00000013067, 0.97324736181, 6677.7017350506),
            (0.00000015622, 2.78241383265, 3340.5951730476),
            (0.00000015622, 4.81318636318, 3340.629680352),
            (0.00000013771, 1.67983063909, 3532.0606928114),
            (0.00000012711, 4.04546734935, 20043.6745601988),
            (0.00000014268, 0.24640247719, 2942.4634232916),
            (0.00000012493, 2.25620513522, 5884.9268465832),
        ),
        # B2
        (
            (0.0001672669, 0.60221392419, 3340.6124266998),
            (0.00004986799, 3.14159265359, 0.0),
            (0.00000302141, 5.55871276021, 6681.2248533996),
            (0.00000025767, 1.89662673499, 13362.4497067992),
            (0.00000021452, 0.91749968618, 10021.8372800994),
            (0.0000001182, 2.242407387, 3337.0893083508),
        ),
        # B3
        (
            (0.00000606506, 1.98050633529, 3340.6124266998),
            (0.00000042611, 0.0, 0.0),
            (0.00000013652, 1.795882288, 6681.2248533996),
        ),
        # B4
        (
            (0.00000011334, 3.45724352586, 3340.6124266998),
            (0.00000013369, 0.0, 0.0),
        ),
        # B5
        (
            (0.00000000457, 4.86794125358, 3340.6124266998),
        ),
    ),
    'R': (
        # R0
        (
            (1.53033488276, 0.0, 0.0),
            (0.14184953153, 3.47971283519, 3340.6124266998),
            (0.00660776357, 3.81783442097, 6681.2248533996),
            (0.00046179117, 4.15595316284, 10021.8372800994),
            (0.00008109738, 5.55958460165, 2810.9214616052),
            (0.00007485315, 1.77238998069, 5621.8429232104),
            (0.00005523193, 1.3643631888, 2281.2304965106),
            (0.0000382516, 4.49407182408, 13362.4497067992),
            (0.00002306539, 0.09081742493, 2544.3144198834),
            (0.00001999399, 5.36059605227, 3337.0893083508),
            (0.00002484385, 4.92545577893, 2942.4634232916),
            (0.00001960198, 4.74249386323, 3344.1355450488),
            (0.00001167115, 2.11261501155, 5092.1519581158),
            (0.00001102828, 5.0090826416, 398.1490034082),
            (0.00000899077, 4.40790433994, 529.6909650946),
            (0.00000992252, 5.83862401067, 6151.533888305),
            (0.00000807348, 2.10216647104, 1059.3819301892),
            (0.0000079791, 3.44839026172, 796.2980068164),
            (0.0000074098, 1.49906336892, 2146.1654164752),
            (0.0000069234, 2.13378814785, 8962.4553499102),
            (0.00000633144, 0.89353285018, 3340.5951730476),
            (0.00000725583, 1.24516913473, 8432.7643848156),
            (0.0000063314, 2.92430448169, 3340.629680352),
            (0.00000574352, 0.82896196337, 2914.0142358238),
            (0.00000526187, 5.38292276228, 3738.761430108),
            (0.00000629976, 1.28738135858, 1751.539531416),
            (0.00000472776, 5.19850457873, 3127.3133312618),
            (0.00000348095, 4.83219198908, 16703.062133499),
            (0.00000283702, 2.90692294913, 3532.0606928114),
            (0.00000279552, 5.25749247548, 6283.0758499914),
            (0.00000233827, 5.10546492529, 5486.777843175),
            (0.00000219428, 5.58340248784, 191.4482661116),
            (0.00000269891, 3.76394728622, 5884.9268465832),
            (0.00000208333, 5.25476080773, 3340.545116397),
            (0.00000275224, 2.90818883832, 1748.016413067),
            (0.00000275501, 1.21767967781, 6254.6266625236),
            (0.00000239133, 2.03669896238, 1194.4470102246),
            (0.0000022319, 4.19861593779, 3149.1641605882),
            (0.00000182686, 5.08062683355, 6684.7479717486),
            (0.00000186213, 5.69871555748, 6677.7017350506),
            (0.00000175995, 5.95341786369, 3870.3033917944),
            (0.00000178613, 4.18423025538, 3333.498879699),
            (0.00000208336, 4.84626442122, 3340.6797370026),
            (0.00000228128, 3.2552902062, 6872.6731195112),
            (0.00000144286, 0.21296012258, 5088.6288397668),
            (0.00000163534, 3.79889068111, 4136.9104335162),
            (0.0000013312, 1.5391010671, 7903.073419721),
            (0.00000141759, 2.47790321309, 4562.4609930212),
            (0.00000114941, 4.31745088059, 1349.8674096588),
            (0.00000118781, 2.12178071222, 1589.0728952838),
            (0.00000102096, 6.18138550087, 9492.1463150048),
            (0.00000128555, 5.49883294915, 8827.3902698748),
            (0.00000111538, 0.55339169625, 11243.6858464208),
            (0.00000082498, 1.6222704459, 11773.3768115154),
            (0.00000083212, 0.61553380568, 8429.2412664666),
            (0.0000008447, 0.6227459311, 1592.5960136328),
            (0.00000086659, 1.74988330093, 2700.7151403858),
            (0.00000071826, 2.47489899385, 12303.06777661),
            (0.00000085312, 1.61621097912, 4690.4798363586),
            (0.00000063641, 2.67334126661, 426.598190876),
            (0.00000068599, 2.40197828418, 4399.994356889),
            (0.00000058559, 4.72052787516, 213.299095438),
            (0.00000062015, 1.10065866221, 1221.8485663214),
            (0.00000066509, 2.21307705185, 6041.3275670856),
            (0.00000055811, 1.23288325946, 3185.1920272656),
            (0.00000054989, 5.72691385306, 951.7184062506),
            (0.00000052418, 3.02366828926, 4292.3308329504),
            (0.00000055686, 5.44686699242, 3723.508958923),
            (0.00000058959, 3.26242666052, 6681.2421070518),
            (0.00000044629, 2.0147364039, 8031.0922630584),
            (0.00000058959, 1.23165502899, 6681.2075997474),
            (0.00000042444, 2.26551590902, 155.4203994342),
            (0.00000038956, 2.57760416009, 3341.592747768),
            (0.00000051561, 5.72326937712, 7079.3738568078),
            (0.00000048939, 5.61614696751, 3553.9115221378),
            (0.00000045414, 5.43290921705, 6467.9257579616),
            (0.00000036435, 4.43921812388, 3894.1818295422),
            (0.0000003598, 1.15966567007, 2288.3440435114),
            (0.00000035265, 5.49029710802, 1990.745017041),
            (0.00000042191, 1.6325374276, 5628.9564702112),
            (0.00000044292, 5.0034136685, 5614.7293762096),
            (0.00000033623, 5.17029029766, 20043.6745601988),
            (0.00000043256, 1.03732072925, 11769.8536931664),
            (0.00000039237, 1.24237122859, 3339.6321056316),
            (0.00000031943, 4.59258406791, 2274.1169495098),
            (0.00000030345, 2.4417767013, 11371.7046897582),
            (0.00000032259, 2.38215172582, 4535.0594369244),
            (0.0000003187, 4.37521442752, 3.523118349),
            (0.0000002935, 4.06034813442, 3097.88382272579),
            (0.00000031972, 1.93970478412, 382.8965322232),
            (0.00000026166, 5.58466944895, 9623.6882766912),
            (0.00000027904, 4.25805969214, 3191.0492295652),
            (0.00000033065, 0.85467740581, 553.5694028424),
            (0.00000027543, 1.57668567401, 9595.2390892234),
            (0.00000025159, 0.81355213242, 10713.9948813262),
            (0.0000002207, 0.85747723964, 3319.8370312074),
            (0.00000024772, 5.38970742761, 2818.035008606),
            (0.00000023359, 6.01453778225, 3496.032826134),
            (0.00000024732, 2.58034797703, 2803.8079146044),
            (0.00000019365, 5.18528750472, 6681.2921637024),
            (0.00000019122, 5.41968559451, 10025.3603984484),
            (0.00000019364, 5.59378382138, 6681.1575430968),
            (0.0000001833, 5.7956732424, 7064.1213856228),
            (0.00000018193, 5.61307426173, 7.1135470008),
            (0.00000020392, 4.53637816869, 6489.776587288),
            (0.0000002126, 6.19160142215, 14054.607308026),
            (0.00000017094, 1.55004739305, 2957.7158944766),
            (0.00000022791, 3.41709388606, 7632.9432596502),
            (0.00000020585, 2.98697279083, 3361.3878221922),
            (0.00000018005, 2.81431094394, 4032.7700279266),
            (0.00000017049, 6.15528099726, 10404.7338123226),
            (0.00000016488, 3.84534700818, 10973.55568635),
            (0.00000016052, 0.92823508003, 14584.2982731206),
            (0.00000021027, 2.38474290907, 4989.0591838972),
            (0.00000016267, 1.92321585819, 7373.3824546264),
            (0.00000016291, 6.28233085307, 7210.9158184942),
            (0.00000018585, 4.07325116588, 2388.8940204492),
            (0.00000015977, 4.58368417141, 3264.3463554242),
            (0.00000019913, 2.7351844595, 5099.2655051166),
            (0.00000019661, 1.86285979, 3443.7052009184),
            (0.000000165, 4.14061745086, 7477.522860216),
            (0.00000019495, 6.03778234182, 10018.3141617504),
            (0.00000015104, 2.65433427561, 2787.0430238574),
            (0.00000019099, 0.22623441108, 13745.3462390224),
            (0.00000017163, 3.18825562972, 3347.7259737006),
            (0.00000013423, 2.12818658793, 3344.2028553516),
            (0.0000001541, 2.2077350796, 2118.7638603784),
            (0.00000017238, 3.67067776368, 3205.5473466644),
            (0.00000013113, 4.27490214998, 14314.1681130498),
            (0.00000016451, 2.86641622696, 14712.317116458),
            (0.00000013734, 1.68629769646, 3337.021998048),
            (0.00000016659, 4.52130808861, 6674.1113063988),
            (0.0000001183, 0.19684525299, 3475.6775067352),
            (0.00000011767, 3.22897247987, 5828.0284716476),
            (0.00000011886, 4.82057654742, 7234.794256242),
            (0.00000010609, 1.73997337551, 639.897286314),
            (0.00000011154, 0.23859830185, 12832.7587417046),
            (0.0000001103, 0.4454170644, 10213.285546211),
            (0.0000001024, 5.74758340632, 242.728603974),
            (0.00000010051, 2.45102946726, 4929.6853219836),
            (0.00000010061, 0.78907665448, 9381.9399937854),
            (0.00000010065, 5.37506605762, 5085.038411115),
            (0.00000011902, 0.79897698904, 3265.8308281325),
            (0.00000010224, 2.66497189021, 2487.4160449478),
        ),
        # R1
        (
            (0.0110743334, 2.0325052495, 3340.6124266998),
            (0.00103175886, 2.37071845682, 6681.2248533996),
            (0.000128772, 0.0, 0.0),
            (0.0001081588, 2.70888093803, 10021.8372800994),
            (0.0000119455, 3.04702182503, 13362.4497067992),
            (0.00000438579, 2.88835072628, 2281.2304965106),
            (0.00000395698, 3.42324611291, 3344.1355450488),
            (0.00000182572, 1.58428644001, 2544.3144198834),
            (0.0000013585, 3.38507017993, 16703.062133499),
            (0.00000128204, 0.6299122057, 1059.3819301892),
            (0.00000127068, 1.9538977574, 796.2980068164),
            (0.00000118443, 2.99761345074, 2146.1654164752),
            (0.00000128362, 6.04343360441, 3337.0893083508),
            (0.00000087537, 3.42052758979, 398.1490034082),
            (0.00000083026, 3.85574986653, 3738.761430108),
            (0.00000075598, 4.45101839349, 6151.533888305),
            (0.00000071999, 2.7644218068, 529.6909650946),
            (0.00000066542, 2.54892602695, 1751.539531416),
            (0.00000054314, 0.67750943459, 8962.4553499102),
            (0.00000051035, 3.72585409207, 6684.7479717486),
            (0.0000006643, 4.40597549957, 1748.016413067),
            (0.00000047863, 2.28527896843, 2914.0142358238),
            (0.00000049428, 5.72959428364, 3340.5951730476),
            (0.00000049424, 1.47717922226, 3340.629680352),
            (0.00000057518, 0.54354327916, 1194.4470102246),
            (0.00000048318, 2.58061691301, 3149.1641605882),
            (0.00000036384, 6.02728752344, 3185.1920272656),
            (0.00000037176, 5.81439911546, 1349.8674096588),
            (0.00000036036, 5.89508336048, 3333.498879699),
            (0.00000031115, 0.9783250696, 191.4482661116),
            (0.00000038953, 2.31900090554, 4136.9104335162),
            (0.00000027244, 5.41367977087, 1592.5960136328),
            (0.000000243, 3.75843924498, 155.4203994342),
            (0.00000022804, 1.74830773908, 5088.6288397668),
            (0.00000022324, 0.9393204073, 951.7184062506),
            (0.00000021708, 3.83571581352, 6283.0758499914),
            (0.00000021304, 0.78049229782, 1589.0728952838),
            (0.00000021631, 4.56895741061, 3532.0606928114),
            (0.00000017956, 4.21930481803, 3870.3033917944),
            (0.00000018237, 0.41328624131, 5486.777843175),
            (0.00000016251, 3.80760134974, 3340.545116397),
            (0.00000016803, 5.54857987615, 3097.88382272579),
            (0.0000001685, 4.53690440252, 4292.3308329504),
            (0.00000015755, 4.75736730681, 9492.1463150048),
            (0.00000015746, 3.72356090283, 20043.6745601988),
            (0.00000020428, 3.13540712557, 4690.4798363586),
            (0.00000014699, 5.95325006816, 3894.1818295422),
            (0.00000016251, 3.39910907599, 3340.6797370026),
            (0.00000014259, 3.99897353022, 1990.745017041),
            (0.00000016528, 0.96752074938, 4399.994356889),
            (0.0000001301, 5.14230107067, 6677.7017350506),
            (0.00000012492, 1.03211063742, 3341.592747768),
            (0.00000016463, 3.53882915214, 2700.7151403858),
            (0.00000016171, 2.34870953554, 553.5694028424),
            (0.00000013169, 0.41461716663, 5614.7293762096),
            (0.00000011272, 1.02375627844, 12303.06777661),
            (0.00000012408, 6.23142869816, 5628.9564702112),
            (0.00000012747, 0.69046314049, 3723.508958923),
            (0.00000011827, 6.25283898676, 2274.1169495098),
            (0.00000010384, 1.23257236014, 426.598190876),
            (0.00000011208, 1.31750963435, 3496.032826134),
            (0.00000010345, 0.9006246469, 4535.0594369244),
            (0.00000012215, 4.22316056098, 7079.3738568078),
        ),
        # R2
        (
            (0.00044242247, 0.47930603943, 3340.6124266998),
            (0.00008138042, 0.86998398093, 6681.2248533996),
            (0.00001274915, 1.22594050809, 10021.8372800994),
            (0.00000187387, 1.57298991982, 13362.4497067992),
            (0.00000040744, 1.9708017506, 3344.1355450488),
            (0.00000052396, 3.14159265359, 0.0),
            (0.00000026616, 1.91665615762, 16703.062133499),
            (0.00000017825, 4.43499505333, 2281.2304965106),
            (0.00000011713, 4.5251045373, 3185.1920272656),
            (0.00000010209, 5.39143469548, 1059.3819301892),
        ),
        # R3
        (
            (0.00001113107, 5.14987350142, 3340.6124266998),
            (0.00000424446, 5.61343766478, 6681.2248533996),
            (0.00000100044, 5.99726827028, 10021.8372800994),
            (0.00000019606, 0.07633062094, 13362.4497067992),
        ),
        # R4
        (
            (0.00000019552, 3.58211650473, 3340.6124266998),
            (0.00000016323, 4.05116076923, 6681.2248533996),
        ),
        # R5
        (
            (0.00000000476, 2.47617204701, 6681.2248533996),
        ),
    ),
}


JUPITER = {
    'L': (
        # L0
        (
            (0.59954691495, 0.0, 0.0),
            (0.09695898711, 5.06191793105, 529.6909650946),
            (0.00573610145, 1.44406205976, 7.1135470008),
            (0.0030638918, 5.41734729976, 1059.3819301892),
            (0.0009717828, 4.14264708819, 632.7837393132),
            (0.00072903096, 3.64042909255, 522.5774180938),
            (0.00064263986, 3.41145185203, 103.0927742186),
            (0.00039806051, 2.29376744855, 419.4846438752),
            (0.0003885778, 1.2723172486, 316.3918696566),
            (0.00027964622, 1.78454589485, 536.8045120954),
            (0.00013589738, 5.7748103159, 1589.0728952838),
            (0.00008246362, 3.58227961655, 206.1855484372),
            (0.00008768686, 3.63000324417, 949.1756089698),
            (0.00007368057, 5.08101125612, 735.8765135318),
            (0.00006263171, 0.02497643742, 213.299095438),
            (0.0000611405, 4.51319531666, 1162.4747044078),
            (0.00004905419, 1.32084631684, 110.2063212194),
            (0.00005305283, 1.30671236848, 14.2270940016),
            (0.00005305457, 4.18625053495, 1052.2683831884),
            (0.00004647249, 4.69958109497, 3.9321532631),
            (0.00003045009, 4.31675960318, 426.598190876),
            (0.00002610001, 1.5666759485, 846.0828347512),
            (0.00002028191, 1.06376547379, 3.1813937377),
            (0.00001764768, 2.14148077766, 1066.49547719),
            (0.00001722983, 3.88036008872, 1265.5674786264),
            (0.00001920959, 0.97168928755, 639.897286314),
            (0.00001633217, 3.58201089758, 515.463871093),
            (0.00001431997, 4.29683690269, 625.6701923124),
            (0.00000973278, 4.09764957065, 95.9792272178),
            (0.00000884439, 2.43701426123, 412.3710968744),
            (0.00000732875, 6.08534113239, 838.9692877504),
            (0.00000731072, 3.80591233956, 1581.959348283),
            (0.00000691928, 6.13368222939, 2118.7638603784),
            (0.0000070919, 1.29272573658, 742.9900605326),
            (0.00000614464, 4.10853496756, 1478.8665740644),
            (0.00000495224, 3.75567461379, 323.5054166574),
            (0.00000581902, 4.53967717552, 309.2783226558),
            (0.00000375657, 4.70299124833, 1368.660252845),
            (0.00000389864, 4.89716105852, 1692.1656695024),
            (0.00000341006, 5.71452525783, 533.6231183577),
            (0.00000330458, 4.74049819491, 0.0481841098),
            (0.00000440854, 2.95818460943, 454.9093665273),
            (0.00000417266, 1.03554430161, 2.4476805548),
            (0.0000024417, 5.220208789, 728.762966531),
            (0.0000026154, 1.87652461032, 0.9632078465),
            (0.00000256568, 3.72410724159, 199.0720014364),
            (0.00000261009, 0.82047246448, 380.12776796),
            (0.00000220382, 1.65115015995, 543.9180590962),
            (0.00000201996, 1.80684574186, 1375.7737998458),
            (0.00000207327, 1.85461666594, 525.7588118315),
            (0.00000197046, 5.29252149016, 1155.361157407),
            (0.00000235141, 1.22693908124, 909.8187330546),
            (0.00000174809, 5.90973505276, 956.2891559706),
            (0.00000149368, 4.37745104275, 1685.0521225016),
            (0.00000175184, 3.22634903433, 1898.3512179396),
            (0.00000175191, 3.72966554761, 942.062061969),
            (0.00000157909, 4.36483921766, 1795.258443721),
            (0.00000137871, 1.31797920785, 1169.5882514086),
            (0.00000117495, 2.5002214089, 1596.1864422846),
            (0.00000150502, 3.90625022622, 74.7815985673),
            (0.00000116757, 3.38920921041, 0.5212648618),
            (0.00000105895, 4.55439798236, 526.5095713569),
            (0.00000130531, 4.16867945489, 1045.1548361876),
            (0.00000141445, 3.13568357861, 491.5579294568),
            (0.00000099511, 1.42117395747, 532.8723588323),
            (0.00000096137, 1.18156870005, 117.3198682202),
            (0.00000091758, 0.85756633461, 1272.6810256272),
            (0.00000087695, 1.21738140813, 453.424893819),
            (0.00000068507, 2.35242959478, 2.9207613068),
            (0.00000066098, 5.34386149468, 1471.7530270636),
            (0.00000077401, 4.42676337124, 39.3568759152),
            (0.00000072006, 4.23834923691, 2111.6503133776),
            (0.00000063406, 4.97665525033, 0.7507595254),
            (0.00000059427, 4.11130498612, 2001.4439921582),
            (0.00000062481, 0.51211384012, 220.4126424388),
            (0.00000066532, 2.98864358135, 2214.7430875962),
            (0.00000060194, 4.12628179571, 4.192785694),
            (0.00000056012, 1.15493222602, 21.3406410024),
            (0.00000052854, 0.91207215543, 10.2949407385),
            (0.00000070297, 5.14180555282, 835.0371344873),
            (0.00000051916, 4.1004818002, 1258.4539316256),
            (0.00000046442, 4.66531163524, 5.6290742925),
            (0.0000005819, 5.86646380344, 5753.3848848968),
            (0.00000040103, 4.68801114087, 0.1600586944),
            (0.00000046654, 4.79394835282, 305.3461693927),
            (0.00000039298, 4.25448423697, 853.196381752),
            (0.00000046042, 5.1098351515, 4.665866446),
            (0.00000054459, 1.57072704127, 983.1158589136),
            (0.0000003892, 6.0759290558, 518.6452648307),
            (0.0000003845, 2.43836870888, 433.7117378768),
            (0.000000468, 3.54640538283, 5.4166259714),
            (0.0000004183, 4.67982493646, 302.164775655),
            (0.0000003592, 2.45088036239, 430.5303441391),
            (0.00000037888, 0.21127448431, 2648.454825473),
            (0.0000003919, 1.71835571629, 11.0457002639),
            (0.00000037567, 6.19481310233, 831.8557407496),
            (0.00000035828, 4.61459907698, 2008.557539159),
            (0.00000043402, 0.14992289081, 528.2064923863),
            (0.00000031598, 5.14073450755, 1788.1448967202),
            (0.00000029849, 5.34441117167, 2221.856634597),
            (0.00000032811, 5.28907118836, 88.865680217),
            (0.00000027686, 1.85227036207, 0.2124483211),
            (0.0000002582, 3.85920882494, 2317.8358618148),
            (0.00000024705, 2.63495214991, 114.1384744825),
            (0.00000033844, 1.00563073268, 9683.5945811164),
            (0.00000024266, 3.82355417268, 1574.8458012822),
            (0.00000027111, 2.80845435102, 18.1592472647),
            (0.00000026837, 1.77586123775, 532.1386456494),
            (0.00000026064, 2.74361318804, 2531.1349572528),
            (0.00000030765, 0.42330537728, 1.4844727083),
            (0.00000030476, 3.66677894407, 508.3503240922),
            (0.00000023282, 3.24372142416, 984.6003316219),
            (0.00000019445, 0.52370214471, 14.977853527),
            (0.00000019332, 4.86314494382, 1361.5467058442),
            (0.0000002291, 3.84914895064, 2428.0421830342),
            (0.00000021617, 6.01696940024, 1063.3140834523),
            (0.00000020155, 5.59582008789, 527.2432845398),
            (0.00000023732, 2.52766031921, 494.2662424425),
            (0.00000020189, 1.01560227681, 628.8515860501),
            (0.00000015994, 5.09003530653, 529.7391492044),
            (0.00000016134, 5.27095037302, 142.4496501338),
            (0.00000020697, 4.03443281612, 355.7487455718),
            (0.00000021479, 1.28668134295, 35.4247226521),
            (0.00000014964, 4.8603968439, 2104.5367663768),
            (0.00000017242, 1.59187913206, 1439.5096981492),
            (0.00000015994, 1.89222417794, 529.6427809848),
            (0.00000017958, 4.30178016003, 6.1503391543),
            (0.00000013279, 2.18943981644, 1055.4497769261),
            (0.00000014148, 2.71597731671, 0.2606324309),
            (0.00000014689, 0.87944553412, 99.1606209555),
            (0.00000014202, 2.41335693735, 530.6541729411),
            (0.0000001532, 6.07703092728, 149.5631971346),
            (0.00000015832, 4.11682440678, 636.7158925763),
            (0.00000012398, 2.61042299578, 405.2575498736),
            (0.00000016199, 2.77035044582, 760.25553592),
            (0.00000013665, 3.5603967831, 217.2312487011),
            (0.00000015261, 2.81824770887, 621.7380390493),
            (0.00000014681, 6.26423732742, 569.0478410098),
            (0.00000012529, 1.39077179081, 7.065362891),
            (0.00000011677, 3.60447374272, 2634.2277314714),
            (0.00000011603, 4.60461756191, 7.1617311106),
            (0.00000012152, 0.24540531919, 1485.9801210652),
            (0.00000011347, 2.00818458261, 1073.6090241908),
            (0.00000011242, 2.4800094787, 423.4167971383),
            (0.00000010942, 5.03602448252, 458.8415197904),
            (0.00000011117, 4.04973271023, 519.3960243561),
            (0.00000012256, 4.30153222783, 604.4725636619),
            (0.00000013149, 2.72189077702, 1364.7280995819),
            (0.00000010604, 3.11518747072, 1.2720243872),
            (0.00000010851, 5.08554552028, 2324.9494088156),
            (0.00000010692, 2.51401681528, 2847.5268269094),
            (0.0000001264, 4.75572797691, 528.7277572481),
            (0.00000010084, 4.05599810206, 38.1330356378),
            (0.00000011536, 2.35034215745, 643.8294395771),
            (0.00000010247, 3.63479911496, 2744.4340526908),
            (0.00000010105, 3.65845333837, 107.0249274817),
            (0.00000010121, 1.31482648275, 1905.4647649404),
            (0.00000010128, 2.09034472544, 511.5317178299),
            (0.0000001063, 2.07777800288, 92.0470739547),
        ),
        # L1
        (
            (529.93480757497, 0.0, 0.0),
            (0.00489741194, 4.22066689928, 529.6909650946),
            (0.00228918538, 6.02647464016, 7.1135470008),
            (0.0002765538, 4.57265956824, 1059.3819301892),
            (0.00020720943, 5.45938936295, 522.5774180938),
            (0.00012105732, 0.16985765041, 536.8045120954),
            (0.00006068051, 4.42419502005, 103.0927742186),
            (0.00005433924, 3.98478382565, 419.4846438752),
            (0.00004237795, 5.89009351271, 14.2270940016),
            (0.00002211854, 5.26771446618, 206.1855484372),
            (0.00001295769, 5.55132765087, 3.1813937377),
            (0.00001745919, 4.92669378486, 1589.0728952838),
            (0.00001163411, 0.51450895328, 3.9321532631),
            (0.00001007216, 0.46478398551, 735.8765135318),
            (0.00001173129, 5.8564730435, 1052.2683831884),
            (0.00000847678, 5.7580585045, 110.2063212194),
            (0.00000827329, 4.80312015734, 213.299095438),
            (0.00001003574, 3.15040301822, 426.598190876),
            (0.00001098735, 5.30704981594, 515.463871093),
            (0.00000816397, 0.58643054886, 1066.49547719),
            (0.00000725447, 5.51827471473, 639.897286314),
            (0.00000567845, 5.98867049451, 625.6701923124),
            (0.00000474181, 4.13245269168, 412.3710968744),
            (0.0000041293, 5.73652891261, 95.9792272178),
            (0.00000335817, 3.73248749046, 1162.4747044078),
            (0.00000345249, 4.2415956541, 632.7837393132),
            (0.00000234066, 6.24302226646, 309.2783226558),
            (0.00000194784, 2.21879010911, 323.5054166574),
            (0.0000023434, 4.03469970332, 949.1756089698),
            (0.00000183938, 6.27963588822, 543.9180590962),
            (0.00000198525, 1.50458442825, 838.9692877504),
            (0.00000186899, 6.08620565908, 742.9900605326),
            (0.0000017138, 5.41655983845, 199.0720014364),
            (0.00000130771, 0.62643377351, 728.762966531),
            (0.00000107575, 4.49282760117, 956.2891559706),
            (0.00000115393, 0.68019050174, 846.0828347512),
            (0.00000115047, 5.28641699144, 2118.7638603784),
            (0.00000066824, 5.73365126533, 21.3406410024),
            (0.00000069618, 5.97263450278, 532.8723588323),
            (0.0000006485, 6.08803490288, 1581.959348283),
            (0.00000079686, 5.82412400273, 1045.1548361876),
            (0.00000057939, 0.99453087342, 1596.1864422846),
            (0.00000065635, 0.1292419143, 526.5095713569),
            (0.00000058509, 0.58626971028, 1155.361157407),
            (0.000000566, 1.41198438841, 533.6231183577),
            (0.00000071643, 5.34162650321, 942.062061969),
            (0.00000057368, 5.96851304799, 1169.5882514086),
            (0.00000054935, 5.42806383723, 10.2949407385),
            (0.00000052016, 0.22981299129, 1368.660252845),
            (0.00000052309, 5.72661448388, 117.3198682202),
            (0.00000050418, 6.08075147811, 525.7588118315),
            (0.00000047418, 3.62611843241, 1478.8665740644),
            (0.00000039888, 4.161580136, 1692.1656695024),
            (0.00000046678, 0.51144073175, 1265.5674786264),
            (0.00000032827, 5.03596689455, 220.4126424388),
            (0.00000033558, 0.09913904872, 302.164775655),
            (0.00000029379, 3.35927241533, 4.665866446),
            (0.00000029307, 0.75907909735, 88.865680217),
            (0.00000032449, 5.37492530697, 508.3503240922),
            (0.00000029483, 5.42208897099, 1272.6810256272),
            (0.00000021802, 6.1505405407, 1685.0521225016),
            (0.00000025195, 1.60723063387, 831.8557407496),
            (0.00000021133, 5.863468242, 1258.4539316256),
            (0.00000019747, 2.17205957814, 316.3918696566),
            (0.00000017871, 0.82841413516, 433.7117378768),
            (0.00000017703, 5.95527049039, 5.4166259714),
            (0.0000001723, 2.76395560958, 853.196381752),
            (0.00000017453, 0.70749901224, 1471.7530270636),
            (0.00000017508, 0.49799925173, 1375.7737998458),
            (0.00000014368, 0.9145983114, 18.1592472647),
            (0.00000014107, 0.63031082833, 2.9207613068),
            (0.00000011559, 4.30379009964, 405.2575498736),
            (0.00000011728, 1.76426582357, 380.12776796),
            (0.00000011054, 5.56735602213, 1574.8458012822),
            (0.00000010425, 0.3135503439, 1361.5467058442),
        ),
        # L2
        (
            (0.00047233598, 4.32148323554, 7.1135470008),
            (0.00030629053, 2.93021440216, 529.6909650946),
            (0.0003896555, 0.0, 0.0),
            (0.00003189317, 1.05504615595, 522.5774180938),
            (0.00002723358, 3.41411526638, 1059.3819301892),
            (0.00002729292, 4.84545481351, 536.8045120954),
            (0.00001721069, 4.18734385158, 14.2270940016),
            (0.00000383258, 5.76790714387, 419.4846438752),
            (0.00000367498, 6.05509120409, 103.0927742186),
            (0.00000377524, 0.76048964872, 515.463871093),
            (0.00000337386, 3.78644384244, 3.1813937377),
            (0.000003082, 0.69356654052, 206.1855484372),
            (0.00000218408, 3.81389191353, 1589.0728952838),
            (0.00000198883, 5.33996443444, 1066.49547719),
            (0.00000197445, 2.48356402053, 3.9321532631),
            (0.0000014623, 3.81373196838, 639.897286314),
            (0.00000155862, 1.40642426467, 1052.2683831884),
            (0.0000012957, 5.83738872525, 412.3710968744),
            (0.00000141932, 1.63435169016, 426.598190876),
            (0.00000117327, 1.41435462588, 625.6701923124),
            (0.00000096733, 4.03383427887, 110.2063212194),
            (0.00000090823, 1.10630629042, 95.9792272178),
            (0.00000078769, 4.63726131329, 543.9180590962),
            (0.00000072392, 2.21716670026, 735.8765135318),
            (0.00000087292, 2.52235174825, 632.7837393132),
            (0.0000005691, 3.12292059854, 213.299095438),
            (0.00000048622, 1.67283791618, 309.2783226558),
            (0.00000058475, 0.83216317444, 199.0720014364),
            (0.0000004015, 4.0248544474, 21.3406410024),
            (0.00000039784, 0.62416945827, 323.5054166574),
            (0.00000035718, 2.32581247002, 728.762966531),
            (0.0000002562, 2.51240623862, 1162.4747044078),
            (0.00000029255, 3.60838327799, 10.2949407385),
            (0.00000023591, 3.00532139306, 956.2891559706),
            (0.00000027814, 3.23992013743, 838.9692877504),
            (0.00000025993, 4.5011829829, 742.9900605326),
            (0.00000025194, 1.21868110687, 1045.1548361876),
            (0.00000019458, 4.29028644674, 532.8723588323),
            (0.0000001766, 0.8095394156, 508.3503240922),
            (0.00000015355, 5.81037986941, 1596.1864422846),
            (0.00000017058, 4.20001977723, 2118.7638603784),
            (0.0000001704, 1.8340214664, 526.5095713569),
            (0.00000014661, 3.99989622586, 117.3198682202),
            (0.00000013639, 1.80336677963, 302.164775655),
            (0.0000001323, 2.51856643603, 88.865680217),
            (0.00000012756, 4.36856232414, 1169.5882514086),
            (0.00000015292, 0.68174165476, 942.062061969),
            (0.00000010986, 4.43586634639, 525.7588118315),
            (0.0000001392, 5.95169568482, 316.3918696566),
        ),
        # L3
        (
            (0.00006501665, 2.59862880482, 7.1135470008),
            (0.00001356524, 1.34635886411, 529.6909650946),
            (0.00000470716, 2.47503977883, 14.2270940016),
            (0.0000041696, 3.24451243214, 536.8045120954),
            (0.00000352851, 2.97360159003, 522.5774180938),
            (0.0000015488, 2.07565585817, 1059.3819301892),
            (0.00000086771, 2.51431584316, 515.463871093),
            (0.00000033538, 3.82633794497, 1066.49547719),
            (0.00000044378, 0.0, 0.0),
            (0.00000022644, 2.98231326774, 543.9180590962),
            (0.00000023737, 1.27667172313, 412.3710968744),
            (0.00000028457, 2.44754756058, 206.1855484372),
            (0.00000019798, 2.10099934005, 639.897286314),
            (0.0000001974, 1.40255938973, 419.4846438752),
            (0.00000018768, 1.593684035, 103.0927742186),
            (0.00000017033, 2.30214681202, 21.3406410024),
            (0.00000016774, 2.59821460673, 1589.0728952838),
            (0.00000016214, 3.14521117299, 625.6701923124),
            (0.00000016055, 3.36030126297, 1052.2683831884),
            (0.00000013392, 2.75973892202, 95.9792272178),
            (0.00000013234, 2.5386224434, 199.0720014364),
            (0.00000012611, 6.265781104, 426.598190876),
        ),
        # L4
        (
            (0.00000669483, 0.8528242109, 7.1135470008),
            (0.00000099961, 0.74258947751, 14.2270940016),
            (0.00000114019, 3.14159265359, 0.0),
            (0.00000050024, 1.65346208248, 536.8045120954),
            (0.00000043585, 5.82026386621, 529.6909650946),
            (0.00000031813, 4.8582998665, 522.5774180938),
            (0.00000014742, 4.29061635784, 515.463871093),
        ),
        # L5
        (
            (0.00000049577, 5.25658966184, 7.1135470008),
            (0.00000015761, 5.25126837478, 14.2270940016),
        ),
    ),
    'B': (
        # B0
        (
            (0.02268615703, 3.55852606718, 529.6909650946),
            (0.00109971634, 3.90809347389, 1059.3819301892),
            (0.00110090358, 0.0, 0.0),
            (0.00008101427, 3.60509573368, 522.5774180938),
            (0.00006043996, 4.25883108794, 1589.0728952838),
            (0.00006437782, 0.30627121409, 536.8045120954),
            (0.0000110688, 2.98534421928, 1162.4747044078),
            (0.00000941651, 2.93619072405, 1052.2683831884),
            (0.00000894088, 1.75447429921, 7.1135470008),
            (0.0000076728, 2.1547359406, 632.7837393132),
            (0.00000944328, 1.67522288396, 426.598190876),
            (0.0000068422, 3.67808770098, 213.299095438),
            (0.00000629223, 0.64343282328, 1066.49547719),
            (0.00000835861, 5.17881973234, 103.0927742186),
            (0.0000053167, 2.70305954352, 110.2063212194),
            (0.00000558524, 0.01354830508, 846.0828347512),
            (0.00000464449, 1.17337249185, 949.1756089698),
            (0.00000431072, 2.60825000494, 419.4846438752),
            (0.00000351433, 4.61062990714, 2118.7638603784),
            (0.00000123148, 3.34968181384, 1692.1656695024),
            (0.00000115038, 5.04892295442, 316.3918696566),
            (0.0000013216, 4.7781699067, 742.9900605326),
            (0.00000103402, 2.31878999565, 1478.8665740644),
            (0.00000116379, 1.38688232033, 323.5054166574),
            (0.0000010242, 3.15293785436, 1581.959348283),
            (0.00000103762, 3.7010383811, 515.463871093),
            (0.0000007865, 3.98318653238, 1265.5674786264),
            (0.00000069935, 2.56006216424, 956.2891559706),
            (0.00000055597, 0.37500753017, 1375.7737998458),
            (0.00000051986, 0.99007119033, 1596.1864422846),
            (0.00000055194, 0.40176412035, 525.7588118315),
            (0.00000063456, 4.50073574333, 735.8765135318),
            (0.00000049691, 0.18649893085, 543.9180590962),
            (0.00000048831, 3.57260550671, 533.6231183577),
            (0.00000028353, 1.53532744749, 625.6701923124),
            (0.00000029209, 5.43145863011, 206.1855484372),
            (0.00000023255, 5.95197992848, 838.9692877504),
            (0.00000022841, 6.19262787685, 532.8723588323),
            (0.00000023202, 4.06473368575, 526.5095713569),
            (0.00000024436, 6.10947656959, 1169.5882514086),
            (0.00000021116, 4.96322972735, 2648.454825473),
            (0.00000017879, 3.08704395969, 1795.258443721),
            (0.00000016234, 4.83515727869, 1368.660252845),
            (0.00000021314, 2.69476951059, 1045.1548361876),
            (0.0000001574, 1.15130330106, 942.062061969),
            (0.00000017325, 1.61550009206, 14.2270940016),
            (0.00000013396, 2.30539585502, 853.196381752),
            (0.00000011904, 3.09811974536, 2111.6503133776),
            (0.00000011734, 2.83006431723, 2008.557539159),
            (0.00000011291, 0.98957560201, 433.7117378768),
            (0.0000001183, 4.76527836803, 309.2783226558),
            (0.00000010702, 3.70181397065, 2221.856634597),
            (0.00000010815, 5.81958878617, 1272.6810256272),
            (0.00000013505, 3.2812697576, 1155.361157407),
            (0.00000010179, 2.58691128827, 117.3198682202),
            (0.00000010632, 5.23487936086, 95.9792272178),
        ),
        # B1
        (
            (0.00177351787, 5.70166488486, 529.6909650946),
            (0.00003230171, 5.7794161934, 1059.3819301892),
            (0.00003081364, 5.47464296527, 522.5774180938),
            (0.00002211914, 4.73477480209, 536.8045120954),
            (0.00001694232, 3.14159265359, 0.0),
            (0.00000346445, 4.74595174109, 1052.2683831884),
            (0.00000234264, 5.18856099929, 1066.49547719),
            (0.00000196154, 6.18554286642, 7.1135470008),
            (0.00000150468, 3.92721226087, 1589.0728952838),
            (0.00000114128, 3.4389727183, 632.7837393132),
            (0.00000096667, 2.9142630409, 949.1756089698),
            (0.00000076599, 2.50522188662, 103.0927742186),
            (0.00000081671, 5.07666097497, 1162.4747044078),
            (0.00000076572, 0.61288981445, 419.4846438752),
            (0.00000073875, 5.49958292155, 515.463871093),
            (0.00000049915, 3.94799616572, 735.8765135318),
            (0.00000060544, 5.44740084359, 213.299095438),
            (0.00000036561, 4.69828392839, 543.9180590962),
            (0.00000046032, 0.53850360901, 110.2063212194),
            (0.00000045123, 1.89516645239, 846.0828347512),
            (0.00000036019, 6.10952578764, 316.3918696566),
            (0.00000031975, 4.92452714629, 1581.959348283),
            (0.00000021015, 5.6295773141, 1596.1864422846),
            (0.00000023156, 5.84829490183, 323.5054166574),
            (0.00000024719, 3.94107395247, 2118.7638603784),
            (0.00000017274, 5.65310656429, 533.6231183577),
            (0.00000016521, 5.89840100621, 526.5095713569),
            (0.00000016698, 5.66663034948, 1265.5674786264),
            (0.00000015815, 4.43314786393, 1045.1548361876),
            (0.00000013398, 4.30179033605, 532.8723588323),
            (0.00000011744, 1.80990486955, 956.2891559706),
            (0.00000011925, 4.30094564154, 525.7588118315),
            (0.00000010542, 6.15533910933, 14.2270940016),
        ),
        # B2
        (
            (0.00008094051, 1.46322843658, 529.6909650946),
            (0.00000742415, 0.95691639003, 522.5774180938),
            (0.00000813244, 3.14159265359, 0.0),
            (0.00000398951, 2.89888666447, 536.8045120954),
            (0.00000342226, 1.44683789727, 1059.3819301892),
            (0.00000073948, 0.40724675866, 1052.2683831884),
            (0.00000046151, 3.48036895772, 1066.49547719),
            (0.00000029314, 0.99088831805, 515.463871093),
            (0.00000029717, 1.92504171329, 1589.0728952838),
            (0.00000022753, 4.27124052435, 7.1135470008),
            (0.00000013916, 2.92242387338, 543.9180590962),
            (0.00000012067, 5.22168932482, 632.7837393132),
            (0.00000010703, 4.88024222475, 949.1756089698),
        ),
        # B3
        (
            (0.00000251624, 3.38087923084, 529.6909650946),
            (0.00000121738, 2.733118372, 522.5774180938),
            (0.00000048694, 1.03689996685, 536.8045120954),
            (0.00000010988, 2.31463561347, 1052.2683831884),
        ),
        # B4
        (
            (0.0000001505, 4.52956999637, 522.5774180938),
        ),
        # B5
        (
            (0.00000001445, 0.09198554072, 522.5774180938),
        ),
    ),
    'R': (
        # R0
        (
            (5.20887429471, 0.0, 0.0),
            (0.2520932702, 3.49108640015, 529.6909650946),
            (0.00610599902, 3.84115365602, 1059.3819301892),
            (0.00282029465, 2.57419879933, 632.7837393132),
            (0.00187647391, 2.07590380082, 522.5774180938),
            (0.00086792941, 0.71001090609, 419.4846438752),
            (0.00072062869, 0.21465694745, 536.8045120954),
            (0.00065517227, 5.97995850843, 316.3918696566),
            (0.0002913462, 1.6775924371, 103.0927742186),
            (0.00030135275, 2.16132058449, 949.1756089698),
            (0.00023453209, 3.54023147303, 735.8765135318),
            (0.0002228371, 4.19362773546, 1589.0728952838),
            (0.0002394734, 0.27457854894, 7.1135470008),
            (0.000130326, 2.96043055741, 1162.4747044078),
            (0.00009703346, 1.90669572402, 206.1855484372),
            (0.00012749004, 2.71550102862, 1052.2683831884),
            (0.00009161431, 4.41352618935, 213.299095438),
            (0.00007894539, 2.47907551404, 426.598190876),
            (0.00007057978, 2.18184753111, 1265.5674786264),
            (0.00006137755, 6.26417542514, 846.0828347512),
            (0.00005477093, 5.65729325169, 639.897286314),
            (0.00003502519, 0.56531297394, 1066.49547719),
            (0.0000413689, 2.72219979684, 625.6701923124),
            (0.00004170012, 2.01605033912, 515.463871093),
            (0.00002499966, 4.55182055941, 838.9692877504),
            (0.00002616955, 2.00993967129, 1581.959348283),
            (0.00001911876, 0.85621927419, 412.3710968744),
            (0.00002127644, 6.1275146175, 742.9900605326),
            (0.00001610549, 3.08867789275, 1368.660252845),
            (0.00001479484, 2.68026191372, 1478.8665740644),
            (0.00001230708, 1.89042979701, 323.5054166574),
            (0.0000121681, 1.80171561024, 110.2063212194),
            (0.00000961072, 4.54876989805, 2118.7638603784),
            (0.00000885708, 4.14785948471, 533.6231183577),
            (0.000007767, 3.6769695469, 728.762966531),
            (0.00000998579, 2.8720894011, 309.2783226558),
            (0.00001014959, 1.38673237666, 454.9093665273),
            (0.00000727162, 3.98824686402, 1155.361157407),
            (0.00000655289, 2.79065604219, 1685.0521225016),
            (0.00000821465, 1.59342534396, 1898.3512179396),
            (0.00000620798, 4.82284338962, 956.2891559706),
            (0.00000653981, 3.38150775269, 1692.1656695024),
            (0.00000812036, 5.94091899141, 909.8187330546),
            (0.0000056212, 0.08095987241, 543.9180590962),
            (0.00000542221, 0.28360266386, 525.7588118315),
            (0.00000457859, 0.1272269451, 1375.7737998458),
            (0.00000614784, 2.27624915604, 942.062061969),
            (0.00000435805, 2.60272129748, 95.9792272178),
            (0.00000496066, 5.53005947761, 380.12776796),
            (0.00000469965, 2.81896276101, 1795.258443721),
            (0.00000445003, 0.14623567024, 14.2270940016),
            (0.00000290869, 3.89339143564, 1471.7530270636),
            (0.00000276627, 2.52238450687, 2001.4439921582),
            (0.00000275084, 2.98863518924, 526.5095713569),
            (0.00000293875, 2.04938438861, 199.0720014364),
            (0.00000290985, 6.03131226226, 1169.5882514086),
            (0.00000338342, 2.79873192583, 1045.1548361876),
            (0.00000257482, 6.13395478303, 532.8723588323),
            (0.00000319013, 1.34803130803, 2214.7430875962),
            (0.00000309352, 5.36855804945, 1272.6810256272),
            (0.00000345804, 1.56404293688, 491.5579294568),
            (0.00000303364, 1.15407454372, 5753.3848848968),
            (0.00000192325, 0.91996333387, 1596.1864422846),
            (0.00000215398, 2.63572815848, 2111.6503133776),
            (0.00000200738, 2.37259566683, 1258.4539316256),
            (0.00000239036, 3.57397189838, 835.0371344873),
            (0.00000197073, 5.92859096863, 453.424893819),
            (0.0000013944, 3.63960322318, 1788.1448967202),
            (0.00000191373, 6.2825131187, 983.1158589136),
            (0.00000176551, 2.57669991654, 9683.5945811164),
            (0.00000123567, 2.26158186345, 2317.8358618148),
            (0.00000128176, 4.6658590767, 831.8557407496),
            (0.0000011243, 0.85604150812, 433.7117378768),
            (0.00000128817, 1.10567106595, 2531.1349572528),
            (0.0000009939, 4.50312054049, 518.6452648307),
            (0.0000009387, 2.7255387999, 853.196381752),
            (0.00000106481, 5.8146222229, 220.4126424388),
            (0.00000120188, 2.95156363556, 3.9321532631),
            (0.00000104002, 2.22221906187, 74.7815985673),
            (0.00000081655, 3.23481337678, 1361.5467058442),
            (0.00000112513, 4.86216964016, 528.2064923863),
            (0.00000079539, 0.8854224683, 430.5303441391),
            (0.00000085801, 2.11458386763, 1574.8458012822),
            (0.00000085685, 2.33823884827, 2428.0421830342),
            (0.00000068311, 3.35727048905, 2104.5367663768),
            (0.0000006957, 3.04164697156, 302.164775655),
            (0.00000069775, 3.22402404312, 305.3461693927),
            (0.0000006957, 0.20494979941, 532.1386456494),
            (0.00000056991, 2.00204191909, 2634.2277314714),
            (0.00000077062, 2.09816000231, 508.3503240922),
            (0.00000056716, 3.91743976711, 2221.856634597),
            (0.00000058325, 5.72360355252, 628.8515860501),
            (0.00000052485, 4.02485010492, 527.2432845398),
            (0.00000063645, 1.09973563964, 1364.7280995819),
            (0.00000053607, 0.87425992614, 2847.5268269094),
            (0.00000059598, 0.95822471775, 494.2662424425),
            (0.0000005796, 3.45779497978, 2008.557539159),
            (0.00000041512, 3.51955526735, 529.7391492044),
            (0.00000044666, 1.62313786651, 984.6003316219),
            (0.00000044883, 4.90091959557, 2648.454825473),
            (0.00000053206, 1.19800364308, 760.25553592),
            (0.00000044393, 4.42623747662, 1063.3140834523),
            (0.00000037566, 2.93021095213, 1677.9385755008),
            (0.00000041516, 0.32174409278, 529.6427809848),
            (0.00000042855, 0.03093594081, 1439.5096981492),
            (0.00000045963, 2.54342106514, 636.7158925763),
            (0.00000040181, 4.39381642864, 1148.2476104062),
            (0.0000003877, 4.31675565025, 149.5631971346),
            (0.00000040348, 2.10140891053, 2744.4340526908),
            (0.00000048851, 5.60297777544, 2810.9214616052),
            (0.00000037085, 5.07828164301, 1905.4647649404),
            (0.00000043875, 1.24536971083, 621.7380390493),
            (0.00000034005, 3.09360167248, 2420.9286360334),
            (0.00000036782, 0.84232174637, 530.6541729411),
            (0.00000031139, 5.35811251334, 1485.9801210652),
            (0.00000039295, 4.70800489067, 569.0478410098),
            (0.000000397, 2.46163878814, 355.7487455718),
            (0.00000031527, 6.19284070863, 3.1813937377),
            (0.00000028399, 2.48456666067, 519.3960243561),
            (0.00000032432, 2.73281750275, 604.4725636619),
            (0.00000027119, 3.92341697086, 2324.9494088156),
            (0.00000026753, 1.74975198417, 2950.619601128),
            (0.00000028986, 1.83535862643, 1891.2376709388),
            (0.00000026493, 0.60380196895, 1055.4497769261),
            (0.00000033525, 0.76068430639, 643.8294395771),
            (0.00000026568, 1.03594610835, 405.2575498736),
            (0.00000025534, 3.46320665375, 458.8415197904),
            (0.00000024421, 0.8818183693, 423.4167971383),
            (0.00000032949, 3.18597137308, 528.7277572481),
            (0.00000022456, 0.43129919683, 1073.6090241908),
            (0.00000021599, 1.41820425091, 540.7366653585),
            (0.00000025673, 0.5235819476, 511.5317178299),
            (0.00000021115, 3.08023522766, 629.6023455755),
            (0.00000022713, 0.65234613144, 3163.918696566),
            (0.00000019189, 5.16589014963, 635.9651330509),
            (0.00000026042, 1.33629471285, 330.6189636582),
            (0.00000018263, 3.59973446951, 746.9222137957),
            (0.0000001821, 2.66819439927, 1994.3304451574),
            (0.00000019724, 4.13552133321, 1464.6394800628),
            (0.0000001948, 1.85656428109, 3060.8259223474),
            (0.00000023927, 4.99826361784, 1289.9465010146),
            (0.00000021886, 5.91718683551, 1802.3719907218),
            (0.00000017482, 2.82161612542, 2737.32050569),
            (0.00000016608, 5.67394889755, 408.4389436113),
            (0.00000022892, 5.26731352093, 672.1406152284),
            (0.00000018349, 1.89869734949, 1021.2488945514),
            (0.00000019123, 3.65882402977, 415.5524906121),
            (0.00000015735, 3.34772676006, 1056.2005364515),
            (0.00000016373, 0.18094878053, 1699.2792165032),
            (0.00000018899, 3.69120638874, 88.865680217),
            (0.00000018655, 1.97327300097, 38.1330356378),
            (0.00000015542, 3.8220488101, 721.6494195302),
            (0.0000001678, 1.90976657921, 217.2312487011),
            (0.00000015313, 1.05907174619, 114.1384744825),
            (0.0000001519, 1.32317039042, 117.3198682202),
            (0.0000001508, 3.74469077216, 2641.3412784722),
            (0.00000019836, 2.73184571324, 39.3568759152),
            (0.00000014708, 1.67270454473, 529.1697002328),
            (0.00000014036, 3.54305270022, 142.4496501338),
            (0.00000012931, 1.48829749349, 3267.0114707846),
            (0.00000014924, 1.3254608594, 490.3340891794),
            (0.00000014753, 4.64530618027, 6283.0758499914),
            (0.00000014672, 0.80451954754, 5223.6939198022),
            (0.00000012085, 3.67072510553, 750.1036075334),
            (0.00000011954, 2.97127390765, 505.3119427064),
            (0.0000001465, 2.1679293025, 530.2122299564),
            (0.00000011869, 1.66551754962, 2207.6295405954),
            (0.00000012273, 0.20690014405, 1062.5633239269),
            (0.0000001146, 1.11906683214, 561.934294009),
            (0.00000011083, 3.22049096074, 535.107591066),
            (0.00000011567, 5.22625628971, 524.0618908021),
            (0.00000011161, 3.82945634036, 76.2660712756),
            (0.00000010918, 1.27796962818, 2125.8774073792),
            (0.00000012685, 3.96848605476, 2538.2485042536),
            (0.0000001123, 3.23092119889, 422.6660376129),
            (0.00000012645, 0.7367042858, 908.3342603463),
            (0.0000001133, 5.56127247007, 531.1754378029),
            (0.00000010291, 3.84159025239, 1781.0313497194),
            (0.00000010762, 4.91380719453, 525.0250986486),
            (0.00000011786, 5.11863653538, 685.4739373527),
            (0.0000001198, 1.72470898635, 911.3032057629),
            (0.0000001154, 1.59520481029, 1474.6737883704),
            (0.00000010198, 2.48743123636, 1819.6374661092),
        ),
        # R1
        (
            (0.01271801596, 2.64937511122, 529.6909650946),
            (0.00061661771, 3.00076251018, 1059.3819301892),
            (0.00053443592, 3.89717644226, 522.5774180938),
            (0.00031185167, 4.88276663526, 536.8045120954),
            (0.00041390257, 0.0, 0.0),
            (0.0001184719, 2.41329588176, 419.4846438752),
            (0.0000916636, 4.75979408587, 7.1135470008),
            (0.00003175763, 2.79297987071, 103.0927742186),
            (0.00003203446, 5.21083285476, 735.8765135318),
            (0.00003403605, 3.34688537997, 1589.0728952838),
            (0.00002600003, 3.63435101622, 206.1855484372),
            (0.00002412207, 1.46947308304, 426.598190876),
            (0.00002806064, 3.7422369358, 515.463871093),
            (0.00002676575, 4.33052878699, 1052.2683831884),
            (0.00002100507, 3.92762682306, 639.897286314),
            (0.00001646182, 5.30953510947, 1066.49547719),
            (0.00001641257, 4.41628669824, 625.6701923124),
            (0.00001049866, 3.16113622955, 213.299095438),
            (0.00001024802, 2.55432643018, 412.3710968744),
            (0.00000740996, 2.17094630558, 1162.4747044078),
            (0.00000806404, 2.6775080138, 632.7837393132),
            (0.00000676928, 6.2495347979, 838.9692877504),
            (0.00000468895, 4.70973463481, 543.9180590962),
            (0.00000444683, 0.40281181402, 323.5054166574),
            (0.00000567076, 4.57655414712, 742.9900605326),
            (0.00000415894, 5.36836018215, 728.762966531),
            (0.00000484689, 2.46882793186, 949.1756089698),
            (0.00000337555, 3.1678195112, 956.2891559706),
            (0.00000401738, 4.60528841541, 309.2783226558),
            (0.00000347378, 4.68148808722, 14.2270940016),
            (0.00000260753, 5.34290306101, 846.0828347512),
            (0.00000220084, 4.84210964963, 1368.660252845),
            (0.00000203217, 5.59995425432, 1155.361157407),
            (0.00000246603, 3.92313823537, 942.062061969),
            (0.00000183504, 4.26526769703, 95.9792272178),
            (0.00000180134, 4.40165491159, 532.8723588323),
            (0.00000197134, 3.70551461394, 2118.7638603784),
            (0.00000196005, 3.75877587139, 199.0720014364),
            (0.0000020019, 4.43888814441, 1045.1548361876),
            (0.00000170225, 4.84647488867, 526.5095713569),
            (0.00000146335, 6.12958365535, 533.6231183577),
            (0.00000133483, 1.32245735855, 110.2063212194),
            (0.00000132076, 4.51187950811, 525.7588118315),
            (0.00000123851, 2.04290370696, 1478.8665740644),
            (0.00000121861, 4.40581788491, 1169.5882514086),
            (0.00000115313, 4.46741278152, 1581.959348283),
            (0.00000098527, 5.72833991647, 1596.1864422846),
            (0.00000091608, 4.52965592121, 1685.0521225016),
            (0.00000110638, 3.62504147403, 1272.6810256272),
            (0.00000080536, 4.11311699583, 1258.4539316256),
            (0.00000079552, 2.71898473954, 1692.1656695024),
            (0.00000100164, 5.24693885858, 1265.5674786264),
            (0.00000077854, 5.56722651753, 1471.7530270636),
            (0.00000085766, 0.07906707372, 831.8557407496),
            (0.00000082132, 3.80763015979, 508.3503240922),
            (0.00000055319, 0.35180851191, 316.3918696566),
            (0.00000052338, 5.53074272117, 433.7117378768),
            (0.00000055769, 4.75141241141, 302.164775655),
            (0.00000050597, 4.8560316177, 1375.7737998458),
            (0.00000043554, 4.94441642712, 1361.5467058442),
            (0.00000042172, 1.22404278447, 853.196381752),
            (0.00000037695, 4.26767539209, 2001.4439921582),
            (0.00000049395, 4.01422828967, 220.4126424388),
            (0.00000038263, 5.33025236797, 1788.1448967202),
            (0.00000035611, 1.76205571128, 1795.258443721),
            (0.00000036296, 3.84995284393, 1574.8458012822),
            (0.00000029332, 5.16619257786, 3.9321532631),
            (0.0000002518, 4.33777727362, 519.3960243561),
            (0.00000024778, 2.7290789741, 405.2575498736),
            (0.00000027025, 6.09669947903, 1148.2476104062),
            (0.00000022604, 0.19173890105, 380.12776796),
            (0.00000020499, 4.32881495378, 3.1813937377),
            (0.00000019925, 4.62967500111, 1677.9385755008),
            (0.00000019528, 5.10596326232, 1073.6090241908),
            (0.00000018427, 3.765221783, 1485.9801210652),
            (0.00000018869, 5.05259402407, 2104.5367663768),
            (0.00000017031, 4.01843356903, 2317.8358618148),
            (0.00000016671, 5.42931676507, 88.865680217),
            (0.00000015337, 2.92700926091, 2008.557539159),
            (0.00000014499, 3.63339836845, 628.8515860501),
            (0.00000014575, 5.50832843322, 721.6494195302),
            (0.00000013728, 4.87623389735, 629.6023455755),
            (0.00000018481, 6.03032762264, 330.6189636582),
            (0.00000013499, 1.38539534821, 518.6452648307),
            (0.0000001574, 2.93038271684, 1905.4647649404),
            (0.00000012459, 1.58587053146, 2111.6503133776),
            (0.00000012272, 3.37671053917, 635.9651330509),
            (0.00000011836, 4.08486322993, 2648.454825473),
            (0.00000011166, 4.62623267608, 636.7158925763),
            (0.00000014348, 2.74177797727, 2221.856634597),
            (0.00000011221, 3.55311861205, 1891.2376709388),
            (0.00000013121, 5.83845065644, 1464.6394800628),
            (0.00000011351, 2.5760688623, 511.5317178299),
            (0.00000010487, 0.49850799841, 453.424893819),
            (0.00000010131, 2.76432756215, 423.4167971383),
        ),
        # R2
        (
            (0.00079644833, 1.35865896596, 529.6909650946),
            (0.00008251618, 5.77773935444, 522.5774180938),
            (0.00007029864, 3.27476965833, 536.8045120954),
            (0.00005314006, 1.83835109712, 1059.3819301892),
            (0.00001860833, 2.97682139367, 7.1135470008),
            (0.00000836267, 4.19889881718, 419.4846438752),
            (0.00000964466, 5.48031822015, 515.463871093),
            (0.00000406453, 3.78250730354, 1066.49547719),
            (0.0000042657, 2.22753101795, 639.897286314),
            (0.00000377316, 2.24248352873, 1589.0728952838),
            (0.0000049792, 3.14159265359, 0.0),
            (0.00000339043, 6.12690864038, 625.6701923124),
            (0.00000362943, 5.36761847267, 206.1855484372),
            (0.00000342048, 6.09922969324, 1052.2683831884),
            (0.0000027992, 4.26162555827, 412.3710968744),
            (0.00000332578, 0.00328961161, 426.598190876),
            (0.00000229777, 0.70530766213, 735.8765135318),
            (0.00000200783, 3.06850623368, 543.9180590962),
            (0.00000199807, 4.42884165317, 103.0927742186),
            (0.0000025729, 0.96295364983, 632.7837393132),
            (0.00000138606, 2.93235671606, 14.2270940016),
            (0.00000113535, 0.78713911289, 728.762966531),
            (0.00000086025, 5.14434751994, 323.5054166574),
            (0.00000094565, 1.70498041073, 838.9692877504),
            (0.00000083469, 0.05834873484, 309.2783226558),
            (0.00000075198, 1.60495195911, 956.2891559706),
            (0.00000070451, 1.50988357484, 213.299095438),
            (0.00000080328, 2.98122361797, 742.9900605326),
            (0.00000056203, 0.95534810533, 1162.4747044078),
            (0.00000061649, 6.10137889854, 1045.1548361876),
            (0.00000066572, 5.47307178077, 199.0720014364),
            (0.00000050057, 2.72063162317, 532.8723588323),
            (0.00000051904, 5.58435625607, 942.062061969),
            (0.00000039833, 5.94566506227, 95.9792272178),
            (0.00000044548, 5.52445621411, 508.3503240922),
            (0.00000044282, 0.27118152557, 526.5095713569),
            (0.00000029944, 0.93641735919, 1155.361157407),
            (0.00000028412, 2.87835720211, 525.7588118315),
            (0.0000002633, 4.26891877269, 1596.1864422846),
            (0.00000027039, 2.80607741398, 1169.5882514086),
            (0.00000027477, 2.64841266238, 2118.7638603784),
            (0.00000022705, 0.17830004133, 302.164775655),
            (0.00000029347, 1.7858969235, 831.8557407496),
            (0.00000019991, 0.04328951895, 949.1756089698),
            (0.00000019906, 1.16072627347, 533.6231183577),
            (0.00000021714, 1.88820231818, 1272.6810256272),
            (0.00000017581, 4.14974757919, 846.0828347512),
            (0.00000017085, 5.89188996975, 1258.4539316256),
            (0.00000021407, 4.35468497204, 316.3918696566),
            (0.00000021295, 0.54429472455, 1265.5674786264),
            (0.00000019859, 0.064538258, 1581.959348283),
            (0.00000017025, 0.53383755278, 1368.660252845),
            (0.00000012804, 3.90044242142, 433.7117378768),
            (0.00000013072, 0.79468040717, 110.2063212194),
            (0.00000011945, 0.40671403646, 1361.5467058442),
            (0.00000011695, 4.44394618065, 405.2575498736),
            (0.00000011979, 2.22872778682, 220.4126424388),
            (0.00000010163, 0.99504635158, 1471.7530270636),
        ),
        # R3
        (
            (0.00003519257, 6.05800633846, 529.6909650946),
            (0.00001073239, 1.6732134576, 536.8045120954),
            (0.00000915666, 1.41329676116, 522.5774180938),
            (0.00000341593, 0.52296542656, 1059.3819301892),
            (0.00000254893, 1.19625473533, 7.1135470008),
            (0.00000221512, 0.95225226237, 515.463871093),
            (0.00000069078, 2.26885282314, 1066.49547719),
            (0.00000089729, 3.14159265359, 0.0),
            (0.00000057827, 1.41389745339, 543.9180590962),
            (0.00000057653, 0.52580117593, 639.897286314),
            (0.00000051079, 5.98016364677, 412.3710968744),
            (0.00000046935, 1.57864237959, 625.6701923124),
            (0.00000042824, 6.11689609099, 419.4846438752),
            (0.00000037477, 1.1826276233, 14.2270940016),
            (0.00000033816, 1.66671706951, 1052.2683831884),
            (0.00000031195, 1.04290245896, 1589.0728952838),
            (0.00000030023, 4.63236245032, 426.598190876),
            (0.00000033531, 0.84784977903, 206.1855484372),
            (0.00000020804, 2.50071243814, 728.762966531),
            (0.00000014466, 0.96040197071, 508.3503240922),
            (0.00000012969, 1.5023378855, 1045.1548361876),
            (0.00000011654, 3.55513510121, 323.5054166574),
            (0.00000012319, 2.60952614503, 735.8765135318),
            (0.00000015023, 0.89136998434, 199.0720014364),
            (0.0000001116, 1.79041437555, 309.2783226558),
            (0.00000010554, 6.27845112678, 956.2891559706),
        ),
        # R4
        (
            (0.00000128628, 0.08419309557, 536.8045120954),
            (0.00000113458, 4.24858855779, 529.6909650946),
            (0.0000008265, 3.29754909408, 522.5774180938),
            (0.00000037883, 2.73326611144, 515.463871093),
            (0.00000026694, 5.69142588558, 7.1135470008),
            (0.0000001765, 5.40012536918, 1059.3819301892),
            (0.00000012612, 6.01560416057, 543.9180590962),
        ),
        # R5
        (
            (0.00000011188, 4.75249399945, 536.8045120954),
        ),
    ),
}


SATURN = {
    'L': (
        # L0
        (
            (0.87401354029, 0.0, 0.0),
            (0.1110765978, 3.96205090194, 213.299095438),
            (0.01414150958, 4.58581515873, 7.1135470008),
            (0.00398379386, 0.52112025957, 206.1855484372),
            (0.00350769223, 3.30329903015, 426.598190876),
            (0.00206816296, 0.24658366938, 103.0927742186),
            (0.00079271288, 3.8400707853, 220.4126424388),
            (0.00023990338, 4.6697693486, 110.2063212194),
            (0.00016573583, 0.43719123541, 419.4846438752),
            (0.00014906995, 5.76903283845, 316.3918696566),
            (0.000158203, 0.9380895376, 632.7837393132),
            (0.00014609562, 1.56518573691, 3.9321532631),
            (0.00013160308, 4.44891180176, 14.2270940016),
            (0.00015053509, 2.71670027883, 639.897286314),
            (0.00013005305, 5.98119067061, 11.0457002639),
            (0.00010725066, 3.12939596466, 202.2533951741),
            (0.00005863207, 0.23657028777, 529.6909650946),
            (0.00005227771, 4.2078316238, 3.1813937377),
            (0.00006126308, 1.76328499656, 277.0349937414),
            (0.00005019658, 3.17787919533, 433.7117378768),
            (0.00004592541, 0.61976424374, 199.0720014364),
            (0.00004005862, 2.24479893937, 63.7358983034),
            (0.00002953815, 0.98280385206, 95.9792272178),
            (0.00003873696, 3.22282692566, 138.5174968707),
            (0.00002461172, 2.03163631205, 735.8765135318),
            (0.0000326949, 0.77491895787, 949.1756089698),
            (0.00001758143, 3.26580514774, 522.5774180938),
            (0.00001640183, 5.50504966218, 846.0828347512),
            (0.00001391336, 4.02331978116, 323.5054166574),
            (0.00001580641, 4.3726631412, 309.2783226558),
            (0.00001123515, 2.83726793572, 415.5524906121),
            (0.00001017258, 3.71698151814, 227.5261894396),
            (0.00000848643, 3.19149825839, 209.3669421749),
            (0.00001087237, 4.18343232481, 2.4476805548),
            (0.00000956752, 0.50740889886, 1265.5674786264),
            (0.00000789205, 5.00745123149, 0.9632078465),
            (0.00000686965, 1.74714407827, 1052.2683831884),
            (0.0000065447, 1.59889331515, 0.0481841098),
            (0.00000748811, 2.14398149298, 853.196381752),
            (0.0000063398, 2.29889903023, 412.3710968744),
            (0.00000743584, 5.25276954625, 224.3447957019),
            (0.00000852677, 3.42141350697, 175.1660598002),
            (0.00000579857, 3.09259007048, 74.7815985673),
            (0.00000624904, 0.97046831256, 210.1177017003),
            (0.00000529861, 4.44938897119, 117.3198682202),
            (0.00000542643, 1.51824320514, 9.5612275556),
            (0.00000474279, 5.47527185987, 742.9900605326),
            (0.00000448542, 1.28990416161, 127.4717966068),
            (0.00000546358, 2.12678554211, 350.3321196004),
            (0.00000478054, 2.96488054338, 137.0330241624),
            (0.00000354944, 3.0128648303, 838.9692877504),
            (0.00000451827, 1.04436664241, 490.3340891794),
            (0.00000347413, 1.53928227764, 340.7708920448),
            (0.00000343475, 0.24604039134, 0.5212648618),
            (0.00000309001, 3.49486734909, 216.4804891757),
            (0.00000322185, 0.96137456104, 203.7378678824),
            (0.00000372308, 2.27819108625, 217.2312487011),
            (0.00000321543, 2.57182354537, 647.0108333148),
            (0.00000330196, 0.24715617844, 1581.959348283),
            (0.00000249116, 1.47010534421, 1368.660252845),
            (0.00000286688, 2.37043745859, 351.8165923087),
            (0.00000220225, 4.20422424873, 200.7689224658),
            (0.00000277775, 0.40020408926, 211.8146227297),
            (0.000002045, 6.010822066, 265.9892934775),
            (0.00000207663, 0.48349820488, 1162.4747044078),
            (0.00000208655, 1.34516255304, 625.6701923124),
            (0.00000182454, 5.49122292426, 2.9207613068),
            (0.00000226609, 4.91003163138, 12.5301729722),
            (0.00000207659, 1.283022189, 39.3568759152),
            (0.00000173914, 1.86305806814, 0.7507595254),
            (0.0000018469, 3.50344404958, 149.5631971346),
            (0.00000183511, 0.97254952728, 4.192785694),
            (0.00000146068, 6.23102544071, 195.1398481733),
            (0.00000164541, 0.4400551752, 5.4166259714),
            (0.00000147526, 1.53529320509, 5.6290742925),
            (0.00000139666, 4.29450260069, 21.3406410024),
            (0.00000131283, 4.06828961903, 10.2949407385),
            (0.00000117283, 2.67920400584, 1155.361157407),
            (0.00000149299, 5.73594349789, 52.6901980395),
            (0.00000122373, 1.97588777199, 4.665866446),
            (0.00000113747, 5.59427544714, 1059.3819301892),
            (0.00000102702, 1.19748124058, 1685.0521225016),
            (0.00000118156, 5.340729339, 554.0699874828),
            (0.00000109275, 3.43812715686, 536.8045120954),
            (0.00000110399, 0.1660402409, 1.4844727083),
            (0.00000124969, 6.27737805832, 1898.3512179396),
            (0.00000089949, 5.80392934702, 114.1384744825),
            (0.00000103956, 2.19210363069, 88.865680217),
            (0.00000112437, 1.10502663534, 191.2076949102),
            (0.0000010657, 4.01156608514, 956.2891559706),
            (0.0000009143, 1.8752157751, 38.1330356378),
            (0.00000083791, 5.48810655641, 0.1118745846),
            (0.00000083461, 2.28972767279, 628.8515860501),
            (0.00000096987, 4.53666595763, 302.164775655),
            (0.00000100631, 4.96513666539, 269.9214467406),
            (0.00000075491, 2.18045274099, 728.762966531),
            (0.0000009633, 2.8331918921, 275.5505210331),
            (0.00000082363, 3.05469876064, 440.8252848776),
            (0.00000073888, 5.08914205084, 1375.7737998458),
            (0.00000071633, 5.1094074343, 65.2203710117),
            (0.00000070409, 4.86846451411, 0.2124483211),
            (0.0000006976, 3.71029022489, 14.977853527),
            (0.00000088772, 3.86334563977, 278.5194664497),
            (0.0000006809, 0.7341546099, 1478.8665740644),
            (0.00000066501, 0.02677580336, 70.8494453042),
            (0.00000065682, 2.02165559602, 142.4496501338),
            (0.00000075765, 1.61410487792, 284.1485407422),
            (0.00000063153, 3.49493353034, 479.2883889155),
            (0.00000062539, 2.58713611532, 422.6660376129),
            (0.00000069313, 3.43979731402, 515.463871093),
            (0.00000079021, 4.45154941586, 35.4247226521),
            (0.00000063664, 3.31749528708, 62.2514255951),
            (0.00000052939, 5.51392725227, 0.2606324309),
            (0.00000053011, 3.18480701697, 8.0767548473),
            (0.00000054492, 2.45674090515, 22.0914005278),
            (0.00000050514, 4.26749346978, 99.1606209555),
            (0.0000005517, 0.9679744615, 942.062061969),
            (0.00000049288, 2.38641424063, 1471.7530270636),
            (0.00000047199, 2.02515248245, 312.1990839626),
            (0.0000006108, 1.50295092063, 210.8514148832),
            (0.00000045126, 0.93109376473, 2001.4439921582),
            (0.00000060556, 2.68715551585, 388.4651552382),
            (0.00000043452, 2.52602011714, 288.0806940053),
            (0.00000042544, 3.81793980322, 330.6189636582),
            (0.00000039915, 5.713786529, 408.4389436113),
            (0.00000050145, 6.03164759907, 2214.7430875962),
            (0.0000004586, 0.54229721801, 212.3358875915),
            (0.00000054165, 0.78154835399, 191.9584544356),
            (0.00000047016, 4.59934671151, 437.6438911399),
            (0.00000042362, 1.90070070955, 430.5303441391),
            (0.00000039722, 1.63259419913, 1066.49547719),
            (0.00000036345, 0.84756992711, 213.3472795478),
            (0.00000035468, 4.18603772925, 215.7467759928),
            (0.00000036344, 3.93295730315, 213.2509113282),
            (0.00000038005, 0.31313803095, 423.4167971383),
            (0.00000044746, 1.12488341174, 6.1503391543),
            (0.00000037902, 1.19795851115, 2.7083129857),
            (0.00000043402, 1.37363944007, 563.6312150384),
            (0.00000043764, 3.93043802956, 525.4981794006),
            (0.00000034825, 1.01566605408, 203.0041546995),
            (0.00000031755, 1.69273634405, 0.1600586944),
            (0.0000003088, 6.13525703832, 417.0369633204),
            (0.00000036388, 6.00586032647, 18.1592472647),
            (0.00000029032, 1.19660544505, 404.5067903482),
            (0.00000032812, 0.53649479713, 107.0249274817),
            (0.00000030433, 0.72335287989, 222.8603229936),
            (0.00000032644, 0.81204701486, 1795.258443721),
            (0.00000037769, 3.69666903716, 1272.6810256272),
            (0.00000027679, 1.45663979401, 7.1617311106),
            (0.00000027187, 1.89731951902, 1045.1548361876),
            (0.00000037699, 4.51997049537, 24.3790223882),
            (0.00000034885, 4.46095761791, 214.2623032845),
            (0.0000003265, 0.66372395761, 692.5874843535),
            (0.00000030324, 5.30369950147, 33.9402499438),
            (0.0000002748, 6.22702216249, 1.2720243872),
            (0.00000026657, 4.56713198392, 7.065362891),
            (0.00000031745, 5.49798599565, 56.6223513026),
            (0.0000002805, 5.64447420566, 128.9562693151),
            (0.00000024277, 3.93966553574, 414.0680179038),
            (0.00000032017, 5.22260660455, 92.0470739547),
            (0.00000026976, 0.06705123981, 205.2223405907),
            (0.00000022974, 3.6581775177, 207.6700211455),
            (0.00000031775, 5.59198119173, 6069.7767545534),
            (0.00000023153, 2.10054506119, 1788.1448967202),
            (0.00000031025, 0.37190053329, 703.6331846174),
            (0.00000029376, 0.14742155778, 131.4039498699),
            (0.00000022562, 5.24009182383, 212.7778305762),
            (0.00000026185, 5.41311252822, 140.001969579),
            (0.00000025673, 4.36038885283, 32.2433289144),
            (0.00000020392, 2.8241390926, 429.7795846137),
            (0.00000020659, 0.67091805084, 2317.8358618148),
            (0.00000024397, 3.08740396398, 145.6310438715),
            (0.00000023735, 2.54365387567, 76.2660712756),
            (0.00000020157, 5.06708675157, 617.8058857862),
            (0.00000023307, 3.97357729211, 483.2205421786),
            (0.00000022878, 6.10452832642, 177.8743727859),
            (0.00000022978, 3.20140795404, 208.633228992),
            (0.00000020638, 5.22128727027, 6.592282139),
            (0.00000021446, 0.72034565528, 1258.4539316256),
            (0.00000018034, 6.11382719947, 210.3783341312),
            (0.0000002238, 5.92299908546, 173.9422195228),
            (0.00000019128, 5.77772013766, 213.8203602998),
            (0.00000020871, 5.79126331864, 2531.1349572528),
            (0.00000019327, 1.64147367403, 565.1156877467),
            (0.00000016806, 3.27953583323, 98.8999885246),
            (0.00000020833, 2.01655935909, 860.3099287528),
            (0.00000017939, 3.14329498012, 831.8557407496),
            (0.00000015653, 3.10137669623, 106.2741679563),
            (0.00000018235, 5.22595172482, 73.297125859),
            (0.00000019302, 5.9394711405, 425.1137181677),
            (0.00000014514, 2.75049388379, 1.2238402774),
            (0.00000014562, 5.18795088579, 305.3461693927),
            (0.00000014254, 3.88079504939, 54.1746707478),
            (0.00000014594, 3.25016810034, 78.7137518304),
            (0.00000013637, 2.55486219141, 405.2575498736),
            (0.00000013914, 1.72356993808, 69.1525242748),
            (0.00000013689, 2.37430586272, 125.9873238985),
            (0.00000013496, 0.82683590985, 99.9113804809),
            (0.00000018483, 0.73171264866, 9999.986450773),
            (0.00000013542, 3.58584380924, 234.6397364404),
            (0.00000013741, 6.18458356845, 245.5424243524),
            (0.00000016944, 0.72200792996, 2111.6503133776),
            (0.00000017441, 0.23803796878, 134.5853436076),
            (0.00000014181, 4.51963935804, 59.8037450403),
            (0.00000013598, 2.53776983965, 1.6969210294),
            (0.0000001224, 2.11973445754, 28.3111756513),
            (0.00000011988, 1.62114832786, 1361.5467058442),
            (0.00000011974, 4.0737873512, 280.9671470045),
            (0.00000012758, 5.31146919749, 344.7030453079),
            (0.00000016051, 3.97093160336, 355.7487455718),
            (0.00000011427, 5.51123470805, 192.6921676185),
            (0.00000013133, 4.69168003518, 767.3690829208),
            (0.00000014746, 3.28998910617, 1589.0728952838),
            (0.00000011417, 1.81615681635, 2104.5367663768),
            (0.00000011626, 2.79410384978, 362.8622925726),
            (0.00000013234, 4.16642914717, 225.8292684102),
            (0.00000010599, 5.50554288376, 199.2844497575),
            (0.00000010558, 3.57501718639, 1.4362885985),
            (0.00000010485, 2.84462532686, 85.8272988312),
            (0.00000010296, 0.22225264071, 198.321241911),
            (0.00000010552, 0.18716643576, 217.491881132),
            (0.00000011853, 0.11584857323, 7.6348118626),
            (0.00000010248, 0.2190415417, 144.1465711632),
            (0.00000010403, 1.68776321208, 31.019488637),
            (0.00000010313, 4.72132701805, 216.2198567448),
            (0.00000010719, 2.60869377832, 339.2864193365),
            (0.00000013212, 6.00683506785, 214.7835681463),
            (0.00000011346, 2.61898383052, 7.8643065262),
            (0.00000011882, 4.00188476744, 267.4737661858),
            (0.00000012054, 3.59904816676, 124.433415221),
            (0.00000010142, 3.60807025662, 14.0146456805),
            (0.00000010529, 2.36779614951, 831.1049812242),
            (0.00000010142, 3.93620624488, 207.8824694666),
        ),
        # L1
        (
            (213.54295595986, 0.0, 0.0),
            (0.01296855005, 1.82820544701, 213.299095438),
            (0.00564347566, 2.88500136429, 7.1135470008),
            (0.0009832303, 1.08070061328, 426.598190876),
            (0.0010767877, 2.27769911872, 206.1855484372),
            (0.00040254586, 2.0412825709, 220.4126424388),
            (0.00019941734, 1.27954662736, 103.0927742186),
            (0.00010511706, 2.748803928, 14.2270940016),
            (0.00006939233, 0.40493079985, 639.897286314),
            (0.00004803325, 2.44194097666, 419.4846438752),
            (0.00004056325, 2.92166618776, 110.2063212194),
            (0.0000376863, 3.6496563146, 3.9321532631),
            (0.00003384684, 2.41694251653, 3.1813937377),
            (0.000033022, 1.26256486715, 433.7117378768),
            (0.00003071382, 2.3273931775, 199.0720014364),
            (0.00001953036, 3.563946833, 11.0457002639),
            (0.00001249348, 2.62803737519, 95.9792272178),
            (0.00000921683, 1.9608983425, 227.5261894396),
            (0.00000705587, 4.4168924933, 529.6909650946),
            (0.00000649654, 6.17418093659, 202.2533951741),
            (0.00000627603, 6.11088227167, 309.2783226558),
            (0.00000486843, 6.03998200305, 853.196381752),
            (0.00000468377, 4.61707843907, 63.7358983034),
            (0.00000478501, 4.98776987984, 522.5774180938),
            (0.0000041701, 2.11708169277, 323.5054166574),
            (0.0000040763, 1.29949556676, 209.3669421749),
            (0.00000343826, 3.95854178574, 412.3710968744),
            (0.00000339724, 3.63396398752, 316.3918696566),
            (0.00000335936, 3.77173072712, 735.8765135318),
            (0.00000331933, 2.86077699882, 210.1177017003),
            (0.00000352489, 2.31707079463, 632.7837393132),
            (0.00000289429, 2.73263080235, 117.3198682202),
            (0.00000265801, 0.54344631312, 647.0108333148),
            (0.00000230493, 1.64428879621, 216.4804891757),
            (0.00000280911, 5.74398845416, 2.4476805548),
            (0.00000191667, 2.96512946582, 224.3447957019),
            (0.00000172891, 4.07695221044, 846.0828347512),
            (0.00000167131, 2.59745202658, 21.3406410024),
            (0.00000136328, 2.28580246629, 10.2949407385),
            (0.00000131364, 3.44108355646, 742.9900605326),
            (0.00000127838, 4.09533471247, 217.2312487011),
            (0.00000108862, 6.16141072262, 415.5524906121),
            (0.00000093909, 3.48397279899, 1052.2683831884),
            (0.00000092482, 3.94755499926, 88.865680217),
            (0.00000097584, 4.72845436677, 838.9692877504),
            (0.000000866, 1.21951325061, 440.8252848776),
            (0.00000083463, 3.11269504725, 625.6701923124),
            (0.00000077588, 6.24408938835, 302.164775655),
            (0.00000061557, 1.82789612597, 195.1398481733),
            (0.000000619, 4.29344363385, 127.4717966068),
            (0.00000067106, 0.28961738595, 4.665866446),
            (0.00000056919, 5.01889578112, 137.0330241624),
            (0.0000005416, 5.12628572382, 490.3340891794),
            (0.00000054585, 0.28356341456, 74.7815985673),
            (0.00000051425, 1.45766406064, 536.8045120954),
            (0.00000065843, 5.64757042732, 9.5612275556),
            (0.0000005778, 2.47630552035, 191.9584544356),
            (0.00000044444, 2.70873627665, 5.4166259714),
            (0.00000046799, 1.1772121105, 149.5631971346),
            (0.0000004038, 3.88870105683, 728.762966531),
            (0.00000037768, 2.53379013859, 12.5301729722),
            (0.00000046649, 5.14818326902, 515.463871093),
            (0.00000045891, 2.23198878761, 956.2891559706),
            (0.000000404, 0.4128152044, 269.9214467406),
            (0.00000037191, 3.78239026411, 2.9207613068),
            (0.00000033778, 3.21070688046, 1368.660252845),
            (0.00000037969, 0.6466596718, 422.6660376129),
            (0.00000032857, 0.30063884563, 351.8165923087),
            (0.0000003305, 5.43038091186, 1066.49547719),
            (0.00000030276, 2.84067004928, 203.0041546995),
            (0.00000035116, 6.08421794089, 5.6290742925),
            (0.00000029667, 3.39052569135, 1059.3819301892),
            (0.00000033217, 4.64063092111, 277.0349937414),
            (0.00000031876, 4.3862292377, 1155.361157407),
            (0.00000028913, 2.02614760507, 330.6189636582),
            (0.00000028264, 2.74178953996, 265.9892934775),
            (0.00000030089, 6.18684614308, 284.1485407422),
            (0.00000031329, 2.43455855525, 52.6901980395),
            (0.00000026493, 4.51214170121, 340.7708920448),
            (0.00000021983, 5.14437352579, 4.192785694),
            (0.0000002223, 1.96481952451, 203.7378678824),
            (0.00000020824, 6.16048095923, 860.3099287528),
            (0.0000002169, 2.67578768862, 942.062061969),
            (0.00000022552, 5.88579123, 210.8514148832),
            (0.00000019807, 2.31345263487, 437.6438911399),
            (0.00000019447, 4.76573277668, 70.8494453042),
            (0.0000001931, 4.10209060369, 18.1592472647),
            (0.00000022662, 4.13732273379, 191.2076949102),
            (0.00000018209, 0.90310796389, 429.7795846137),
            (0.00000017667, 1.84954766042, 234.6397364404),
            (0.00000017547, 2.44735118493, 423.4167971383),
            (0.00000015428, 4.23790088205, 1162.4747044078),
            (0.00000014608, 3.59713247857, 1045.1548361876),
            (0.00000014111, 2.94262468353, 1685.0521225016),
            (0.00000016328, 4.05665272725, 949.1756089698),
            (0.00000013348, 6.2450959224, 38.1330356378),
            (0.00000015918, 1.06434204938, 56.6223513026),
            (0.00000014059, 1.43503954068, 408.4389436113),
            (0.00000013093, 5.75815864257, 138.5174968707),
            (0.00000015772, 5.59350835225, 6.1503391543),
            (0.00000014962, 5.77192239389, 22.0914005278),
            (0.00000016024, 1.93900586533, 1272.6810256272),
            (0.00000016751, 5.96673627422, 628.8515860501),
            (0.00000012843, 4.24658666814, 405.2575498736),
            (0.00000013628, 4.09892958087, 1471.7530270636),
            (0.00000015067, 0.74142807591, 200.7689224658),
            (0.00000010961, 1.55022573283, 223.5940361765),
            (0.00000011695, 1.81237511034, 124.433415221),
            (0.00000010346, 3.46814088412, 1375.7737998458),
            (0.00000012056, 1.85655834555, 131.4039498699),
            (0.00000010123, 2.38221133049, 107.0249274817),
            (0.00000010614, 5.36692189034, 215.7467759928),
            (0.0000001208, 4.84549317054, 831.8557407496),
            (0.0000001021, 6.0769296137, 32.2433289144),
        ),
        # L2
        (
            (0.00116441181, 1.17987850633, 7.1135470008),
            (0.00091920844, 0.07425261094, 213.299095438),
            (0.00090592251, 0.0, 0.0),
            (0.00015276909, 4.06492007503, 206.1855484372),
            (0.00010631396, 0.25778277414, 220.4126424388),
            (0.00010604979, 5.40963595885, 426.598190876),
            (0.00004265368, 1.0459555663, 14.2270940016),
            (0.00001215527, 2.91860042123, 103.0927742186),
            (0.00001164684, 4.60942128971, 639.897286314),
            (0.00001081967, 5.6913035167, 433.7117378768),
            (0.00001020079, 0.63369182642, 3.1813937377),
            (0.00001044754, 4.04206453611, 199.0720014364),
            (0.00000633582, 4.38825410036, 419.4846438752),
            (0.00000549329, 5.57303134242, 3.9321532631),
            (0.00000456914, 1.26840971349, 110.2063212194),
            (0.000004251, 0.20935499279, 227.5261894396),
            (0.00000273739, 4.28841011784, 95.9792272178),
            (0.00000161571, 1.3813914942, 11.0457002639),
            (0.00000129494, 1.5658688417, 309.2783226558),
            (0.00000117008, 3.88120915956, 853.196381752),
            (0.00000105415, 4.90003203599, 647.0108333148),
            (0.00000100967, 0.892704931, 21.3406410024),
            (0.00000095227, 5.62561150598, 412.3710968744),
            (0.00000081948, 1.02477558315, 117.3198682202),
            (0.00000074857, 4.76178468163, 210.1177017003),
            (0.00000082727, 6.05030934786, 216.4804891757),
            (0.00000095659, 2.91093561539, 316.3918696566),
            (0.00000063696, 0.35179804917, 323.5054166574),
            (0.0000008486, 5.73472777961, 209.3669421749),
            (0.00000060647, 4.8751785019, 632.7837393132),
            (0.00000066459, 0.48297940601, 10.2949407385),
            (0.00000067184, 0.45648612616, 522.5774180938),
            (0.00000053281, 2.74730541387, 529.6909650946),
            (0.00000045827, 5.69296621745, 440.8252848776),
            (0.00000045293, 1.66856699796, 202.2533951741),
            (0.0000004233, 5.70768187703, 88.865680217),
            (0.0000003214, 0.07050050346, 63.7358983034),
            (0.00000031573, 1.67190022213, 302.164775655),
            (0.0000003115, 4.16379537691, 191.9584544356),
            (0.00000024631, 5.6556472857, 735.8765135318),
            (0.00000026558, 0.83256214407, 224.3447957019),
            (0.00000020108, 5.94364609981, 217.2312487011),
            (0.00000017511, 4.90014736798, 625.6701923124),
            (0.0000001713, 1.62593421274, 742.9900605326),
            (0.00000013744, 3.764971673, 195.1398481733),
            (0.00000012236, 4.71789723976, 203.0041546995),
            (0.0000001194, 0.12620714199, 234.6397364404),
            (0.0000001604, 0.57886320845, 515.463871093),
            (0.00000011154, 5.9221684478, 536.8045120954),
            (0.00000014068, 0.206752937, 838.9692877504),
            (0.00000011013, 5.60207982774, 728.762966531),
            (0.00000011718, 3.12098483554, 846.0828347512),
            (0.00000010601, 3.20327613035, 1066.49547719),
            (0.00000010072, 0.25709351996, 330.6189636582),
            (0.0000001024, 4.9873665607, 422.6660376129),
        ),
        # L3
        (
            (0.00016038734, 5.73945377424, 7.1135470008),
            (0.00004249793, 4.58539675603, 213.299095438),
            (0.00001906524, 4.76082050205, 220.4126424388),
            (0.00001465687, 5.91326678323, 206.1855484372),
            (0.00001162041, 5.61973132428, 14.2270940016),
            (0.00001066581, 3.60816533142, 426.598190876),
            (0.00000239377, 3.86088273439, 433.7117378768),
            (0.00000236975, 5.76826451465, 199.0720014364),
            (0.00000165641, 5.11641150216, 3.1813937377),
            (0.00000131409, 4.74327544615, 227.5261894396),
            (0.00000151352, 2.73594641861, 639.897286314),
            (0.0000006163, 4.74287052463, 103.0927742186),
            (0.00000063365, 0.22850089497, 419.4846438752),
            (0.00000040437, 5.47298059144, 21.3406410024),
            (0.00000040205, 5.9642026672, 95.9792272178),
            (0.00000038746, 5.83386199529, 110.2063212194),
            (0.00000028025, 3.01235311514, 647.0108333148),
            (0.00000025029, 0.9880817074, 3.9321532631),
            (0.00000018101, 1.02506397063, 412.3710968744),
            (0.00000017879, 3.31913418974, 309.2783226558),
            (0.00000016208, 3.89825272754, 440.8252848776),
            (0.00000015763, 5.61667809625, 117.3198682202),
            (0.00000019014, 1.91614237463, 853.196381752),
            (0.00000018262, 4.96738415934, 10.2949407385),
            (0.00000012947, 1.18068953942, 88.865680217),
            (0.00000017919, 4.20376505349, 216.4804891757),
            (0.00000011453, 5.57520615096, 11.0457002639),
            (0.00000010548, 5.92906266269, 191.9584544356),
            (0.00000010389, 3.94838736947, 209.3669421749),
        ),
        # L4
        (
            (0.00001661894, 3.99826248978, 7.1135470008),
            (0.00000257107, 2.98436499013, 220.4126424388),
            (0.00000236344, 3.90241428075, 14.2270940016),
            (0.00000149418, 2.74110824208, 213.299095438),
            (0.00000109598, 1.51515739251, 206.1855484372),
            (0.00000113953, 3.14159265359, 0.0),
            (0.0000006839, 1.72120953337, 426.598190876),
            (0.00000037699, 1.23795458356, 199.0720014364),
            (0.0000004006, 2.04644897412, 433.7117378768),
            (0.00000031219, 3.0109418409, 227.5261894396),
            (0.00000015111, 0.82897064529, 639.897286314),
        ),
        # L5
        (
            (0.00000123615, 2.25923345732, 7.1135470008),
            (0.0000003419, 2.16250652689, 14.2270940016),
            (0.00000027546, 1.19868150215, 220.4126424388),
        ),
    ),
    'B': (
        # B0
        (
            (0.0433067804, 3.60284428399, 213.299095438),
            (0.00240348303, 2.8523848939, 426.598190876),
            (0.00084745939, 0.0, 0.0),
            (0.00030863357, 3.48441504465, 220.4126424388),
            (0.00034116063, 0.57297307844, 206.1855484372),
            (0.0001473407, 2.1184659787, 639.897286314),
            (0.00009916668, 5.79003189405, 419.4846438752),
            (0.00006993564, 4.73604689179, 7.1135470008),
            (0.00004807587, 5.43305315602, 316.3918696566),
            (0.00004788392, 4.9651292742, 110.2063212194),
            (0.00003432125, 2.73255752123, 433.7117378768),
            (0.00001506129, 6.01304536144, 103.0927742186),
            (0.00001060298, 5.63099292414, 529.6909650946),
            (0.00000969071, 5.20434966103, 632.7837393132),
            (0.0000094205, 1.39646678088, 853.196381752),
            (0.00000707645, 3.80302329547, 323.5054166574),
            (0.00000552313, 5.13149109045, 202.2533951741),
            (0.00000399675, 3.35891413961, 227.5261894396),
            (0.00000316063, 1.99716764199, 647.0108333148),
            (0.0000031938, 3.6257155098, 209.3669421749),
            (0.00000284494, 4.88648481625, 224.3447957019),
            (0.00000314225, 0.4651027241, 217.2312487011),
            (0.00000236442, 2.13887472281, 11.0457002639),
            (0.00000215354, 5.94982610103, 846.0828347512),
            (0.00000208522, 2.12003893769, 415.5524906121),
            (0.00000178958, 2.95361514672, 63.7358983034),
            (0.00000207213, 0.73021462851, 199.0720014364),
            (0.0000013914, 1.9982199094, 735.8765135318),
            (0.00000134884, 5.24500819605, 742.9900605326),
            (0.00000140585, 0.64417620299, 490.3340891794),
            (0.00000121669, 3.11537140876, 522.5774180938),
            (0.0000013924, 4.59535168021, 14.2270940016),
            (0.00000115524, 3.10891547171, 216.4804891757),
            (0.00000114218, 0.96261442133, 210.1177017003),
            (0.00000096376, 4.48164339766, 117.3198682202),
            (0.00000080593, 1.3169275015, 277.0349937414),
            (0.00000072952, 3.0598848237, 536.8045120954),
            (0.00000069261, 4.92378633635, 309.2783226558),
            (0.00000074302, 2.8937653962, 149.5631971346),
            (0.0000006804, 2.18002263974, 351.8165923087),
            (0.00000061734, 0.67728106562, 1066.49547719),
            (0.00000056598, 2.60963391288, 440.8252848776),
            (0.00000048864, 5.78725874107, 95.9792272178),
            (0.00000048243, 2.1821183743, 74.7815985673),
            (0.00000038304, 5.29151303843, 1059.3819301892),
            (0.00000036323, 1.63348365121, 628.8515860501),
            (0.00000035055, 1.71279210041, 1052.2683831884),
            (0.0000003427, 2.45740470599, 422.6660376129),
            (0.00000034313, 5.97994514798, 412.3710968744),
            (0.00000033787, 1.14073392951, 949.1756089698),
            (0.00000031633, 4.14722153007, 437.6438911399),
            (0.00000036833, 6.27769966148, 1162.4747044078),
            (0.0000002698, 1.2715481681, 860.3099287528),
            (0.00000023516, 2.74936525342, 838.9692877504),
            (0.0000002346, 0.98962849901, 210.8514148832),
            (0.000000236, 4.11386961467, 3.9321532631),
            (0.00000023631, 3.07427204313, 215.7467759928),
            (0.00000020813, 3.51084686918, 330.6189636582),
            (0.00000019509, 2.81857577372, 127.4717966068),
            (0.00000017103, 3.89784279922, 214.2623032845),
            (0.00000017635, 6.19715516746, 703.6331846174),
            (0.00000017824, 2.28524493886, 388.4651552382),
            (0.00000020935, 0.14356167048, 430.5303441391),
            (0.00000016551, 1.66649120724, 38.1330356378),
            (0.000000191, 2.97699096081, 137.0330241624),
            (0.00000015517, 4.54798410406, 956.2891559706),
            (0.00000017065, 0.16611115812, 212.3358875915),
            (0.00000014169, 0.48937283445, 213.3472795478),
            (0.00000019027, 6.27326062836, 423.4167971383),
            (0.00000013344, 2.37136126257, 429.7795846137),
            (0.00000012565, 1.03178071173, 563.6312150384),
            (0.00000014173, 3.57477564831, 213.2509113282),
            (0.00000011374, 1.45300927024, 1368.660252845),
            (0.00000010585, 6.1763342593, 200.7689224658),
            (0.000000106, 3.84358958373, 138.5174968707),
            (0.00000010263, 2.17423692422, 76.2660712756),
            (0.00000010072, 1.33197220789, 565.1156877467),
            (0.00000012058, 0.441492427, 222.8603229936),
            (0.00000010367, 1.85278552549, 350.3321196004),
        ),
        # B1
        (
            (0.00397554998, 5.33289992556, 213.299095438),
            (0.00049478641, 3.14159265359, 0.0),
            (0.00018571607, 6.09919206378, 426.598190876),
            (0.00014800587, 2.3058606052, 206.1855484372),
            (0.00009643981, 1.6967466012, 220.4126424388),
            (0.00003757161, 1.25429514018, 419.4846438752),
            (0.00002716647, 5.91166664787, 639.897286314),
            (0.00001455309, 0.85161616532, 433.7117378768),
            (0.00001290595, 2.9177085709, 7.1135470008),
            (0.0000085263, 0.43572078997, 316.3918696566),
            (0.00000284386, 1.61881754773, 227.5261894396),
            (0.00000292185, 5.3157425127, 853.196381752),
            (0.0000027509, 3.88864137336, 103.0927742186),
            (0.00000297726, 0.91909206723, 632.7837393132),
            (0.00000172359, 0.05215146556, 647.0108333148),
            (0.00000127731, 1.20711452525, 529.6909650946),
            (0.00000166237, 2.44351613165, 199.0720014364),
            (0.0000015822, 5.20850125766, 110.2063212194),
            (0.00000109839, 2.45695551627, 217.2312487011),
            (0.00000081759, 2.75839171353, 210.1177017003),
            (0.0000008101, 2.86038377187, 14.2270940016),
            (0.00000068658, 1.65537623146, 202.2533951741),
            (0.00000059281, 1.82410768234, 323.5054166574),
            (0.00000065161, 1.25527521313, 216.4804891757),
            (0.00000061024, 1.25273412095, 209.3669421749),
            (0.00000046386, 0.81534705304, 440.8252848776),
            (0.00000036163, 1.81851057689, 224.3447957019),
            (0.00000034041, 2.83971297997, 117.3198682202),
            (0.00000032164, 1.18676132343, 846.0828347512),
            (0.00000033114, 1.3055708001, 412.3710968744),
            (0.00000027282, 4.64744847591, 1066.49547719),
            (0.00000022805, 4.12923703368, 415.5524906121),
            (0.00000027128, 4.44228739187, 11.0457002639),
            (0.000000181, 5.56392353608, 860.3099287528),
            (0.00000020851, 1.4099927374, 309.2783226558),
            (0.00000014947, 1.34302610607, 95.9792272178),
            (0.00000015316, 1.22393617996, 63.7358983034),
            (0.00000014601, 1.0075370497, 536.8045120954),
            (0.00000012842, 2.27059911053, 742.9900605326),
            (0.00000012832, 4.88898877901, 522.5774180938),
            (0.00000013137, 2.45991904379, 490.3340891794),
            (0.00000011883, 1.87308666696, 423.4167971383),
            (0.00000013027, 3.21731634178, 277.0349937414),
            (0.0000001271, 0.29501589197, 422.6660376129),
        ),
        # B2
        (
            (0.00020629977, 0.50482422817, 213.299095438),
            (0.00003719555, 3.99833475829, 206.1855484372),
            (0.00001627158, 6.181899395, 220.4126424388),
            (0.00001346067, 0.0, 0.0),
            (0.00000705842, 3.03914308836, 419.4846438752),
            (0.00000365042, 5.09928680706, 426.598190876),
            (0.00000329632, 5.27899210039, 433.7117378768),
            (0.00000219335, 3.82841533795, 639.897286314),
            (0.00000139393, 1.04272623499, 7.1135470008),
            (0.0000010398, 6.15730992966, 227.5261894396),
            (0.00000092961, 1.97994412845, 316.3918696566),
            (0.00000071242, 4.14754353431, 199.0720014364),
            (0.00000051927, 2.88364833898, 632.7837393132),
            (0.00000048961, 4.43390206741, 647.0108333148),
            (0.00000041373, 3.15927770079, 853.196381752),
            (0.00000028602, 4.52978327558, 210.1177017003),
            (0.00000023969, 1.11595912146, 14.2270940016),
            (0.00000020511, 4.35095844197, 217.2312487011),
            (0.00000019532, 5.30779711223, 440.8252848776),
            (0.00000018263, 0.85391476786, 110.2063212194),
            (0.00000015742, 4.25767226302, 103.0927742186),
            (0.0000001684, 5.68112084135, 216.4804891757),
            (0.00000013613, 2.99904334066, 412.3710968744),
            (0.00000011567, 2.5267992841, 529.6909650946),
        ),
        # B3
        (
            (0.00000666252, 1.99006340181, 213.299095438),
            (0.0000063235, 5.69778316807, 206.1855484372),
            (0.00000398051, 0.0, 0.0),
            (0.00000187838, 4.33779804809, 220.4126424388),
            (0.00000091884, 4.84104208217, 419.4846438752),
            (0.00000042369, 2.38073239056, 426.598190876),
            (0.00000051548, 3.42149490328, 433.7117378768),
            (0.00000025661, 4.40167213109, 227.5261894396),
            (0.00000020551, 5.85313509872, 199.0720014364),
            (0.00000018081, 1.99321433229, 639.897286314),
            (0.00000010874, 5.37344546547, 7.1135470008),
        ),
        # B4
        (
            (0.00000080384, 1.11918414679, 206.1855484372),
            (0.0000003166, 3.12218745098, 213.299095438),
            (0.00000017143, 2.48073200414, 220.4126424388),
            (0.00000011844, 3.14159265359, 0.0),
        ),
        # B5
        (
            (0.00000007895, 2.81927558645, 206.1855484372),
        ),
    ),
    'R': (
        # R0
        (
            (9.55758135801, 0.0, 0.0),
            (0.52921382465, 2.39226219733, 213.299095438),
            (0.01873679934, 5.23549605091, 206.1855484372),
            (0.01464663959, 1.64763045468, 426.598190876),
            (0.00821891059, 5.93520025371, 316.3918696566),
            (0.00547506899, 5.01532628454, 103.0927742186),
            (0.00371684449, 2.27114833428, 220.4126424388),
            (0.00361778433, 3.13904303264, 7.1135470008),
            (0.00140617548, 5.70406652991, 632.7837393132),
            (0.00108974737, 3.29313595577, 110.2063212194),
            (0.00069007015, 5.94099622447, 419.4846438752),
            (0.0006105335, 0.94037761156, 639.897286314),
            (0.00048913044, 1.55733388472, 202.2533951741),
            (0.00034143794, 0.19518550682, 277.0349937414),
            (0.00032401718, 5.47084606947, 949.1756089698),
            (0.00020936573, 0.46349163993, 735.8765135318),
            (0.00020839118, 1.5210259064, 433.7117378768),
            (0.00020746678, 5.33255667599, 199.0720014364),
            (0.00015298457, 3.05943652881, 529.6909650946),
            (0.00014296479, 2.60433537909, 323.5054166574),
            (0.00011993314, 5.98051421881, 846.0828347512),
            (0.00011380261, 1.73105746566, 522.5774180938),
            (0.00012884128, 1.64892310393, 138.5174968707),
            (0.00007752769, 5.85191318903, 95.9792272178),
            (0.00009796061, 5.20475863996, 1265.5674786264),
            (0.00006465967, 0.17733160145, 1052.2683831884),
            (0.00006770621, 3.00433479284, 14.2270940016),
            (0.00005850443, 1.45519636076, 415.5524906121),
            (0.00005307481, 0.5973753405, 63.7358983034),
            (0.00004695746, 2.14919036956, 227.5261894396),
            (0.00004043988, 1.64010323863, 209.3669421749),
            (0.00003688132, 0.7801613317, 412.3710968744),
            (0.00003376457, 3.69528478828, 224.3447957019),
            (0.00002885348, 1.38764077631, 838.9692877504),
            (0.00002976033, 5.68467931117, 210.1177017003),
            (0.00003419551, 4.94549148887, 1581.959348283),
            (0.00003460943, 1.85088802878, 175.1660598002),
            (0.00003400616, 0.55386747515, 350.3321196004),
            (0.0000250763, 3.53851863255, 742.9900605326),
            (0.00002448325, 6.18412386316, 1368.660252845),
            (0.00002406138, 2.96559220267, 117.3198682202),
            (0.00002881181, 0.17960757891, 853.196381752),
            (0.00002173959, 0.01508587396, 340.7708920448),
            (0.00002024483, 5.05411271271, 11.0457002639),
            (0.00001740254, 2.34657043464, 309.2783226558),
            (0.00001861397, 5.93361638244, 625.6701923124),
            (0.00001888436, 0.02968443389, 3.9321532631),
            (0.00001610859, 1.17302463549, 74.7815985673),
            (0.00001462631, 1.92588134017, 216.4804891757),
            (0.00001474547, 5.6767046113, 203.7378678824),
            (0.00001395109, 5.93669404929, 127.4717966068),
            (0.00001781165, 0.76314388077, 217.2312487011),
            (0.00001817186, 5.77713225779, 490.3340891794),
            (0.00001472392, 1.40064915651, 137.0330241624),
            (0.00001304089, 0.77235613966, 647.0108333148),
            (0.00001149773, 5.74021249703, 1162.4747044078),
            (0.00001126667, 4.46707803791, 265.9892934775),
            (0.00001277489, 2.98412586423, 1059.3819301892),
            (0.00001207053, 0.7528593316, 351.8165923087),
            (0.00001071399, 1.13567265104, 1155.361157407),
            (0.00001020922, 5.91233512844, 1685.0521225016),
            (0.00001315042, 5.11202572637, 211.8146227297),
            (0.00001295553, 4.69184139933, 1898.3512179396),
            (0.00001099037, 1.81765118601, 149.5631971346),
            (0.00000998462, 2.63131596867, 200.7689224658),
            (0.00000985869, 2.25992849742, 956.2891559706),
            (0.00000932434, 3.66980793184, 554.0699874828),
            (0.00000664481, 0.60297724821, 728.762966531),
            (0.0000065985, 4.66635439533, 195.1398481733),
            (0.0000061774, 5.62092000007, 942.062061969),
            (0.00000626382, 5.9420823259, 1478.8665740644),
            (0.0000048223, 1.84070179496, 479.2883889155),
            (0.00000487689, 2.79373616806, 3.1813937377),
            (0.00000470086, 0.8384775504, 1471.7530270636),
            (0.00000451817, 5.64468459871, 2001.4439921582),
            (0.00000553128, 3.41088600844, 269.9214467406),
            (0.00000534397, 1.26443331367, 275.5505210331),
            (0.00000472572, 1.8819858466, 515.463871093),
            (0.00000405434, 1.64001413521, 536.8045120954),
            (0.00000517196, 4.44310450526, 2214.7430875962),
            (0.00000452848, 3.00349117198, 302.164775655),
            (0.0000049434, 2.28626675074, 278.5194664497),
            (0.00000489825, 5.80631420383, 191.2076949102),
            (0.00000427459, 0.05741344372, 284.1485407422),
            (0.00000339763, 1.40198657693, 440.8252848776),
            (0.00000340627, 0.89091104306, 628.8515860501),
            (0.00000385974, 1.99700402508, 1272.6810256272),
            (0.00000288298, 1.12160250272, 422.6660376129),
            (0.00000294444, 0.42577061903, 312.1990839626),
            (0.0000026249, 0.31753439818, 1045.1548361876),
            (0.00000295331, 0.67144493789, 88.865680217),
            (0.00000342968, 5.85600322299, 1795.258443721),
            (0.00000341117, 2.3758524725, 525.4981794006),
            (0.00000234018, 4.22756813216, 114.1384744825),
            (0.00000223729, 2.28129446763, 330.6189636582),
            (0.00000275814, 0.47832439352, 38.1330356378),
            (0.00000224592, 0.54754005675, 1788.1448967202),
            (0.000003033, 0.87946670205, 6069.7767545534),
            (0.00000292103, 6.2142061192, 210.8514148832),
            (0.00000226121, 0.37495223398, 142.4496501338),
            (0.00000277257, 5.31917702012, 692.5874843535),
            (0.00000242911, 5.37187983246, 1258.4539316256),
            (0.00000205571, 0.95755250527, 288.0806940053),
            (0.00000207567, 5.38126259725, 2317.8358618148),
            (0.00000186835, 6.03591766061, 404.5067903482),
            (0.00000218536, 5.25607043545, 212.3358875915),
            (0.00000222155, 5.94588016768, 39.3568759152),
            (0.00000179673, 4.41045924362, 408.4389436113),
            (0.0000024144, 1.1252586811, 388.4651552382),
            (0.00000197093, 3.9014194285, 52.6901980395),
            (0.00000236639, 0.90802744873, 1375.7737998458),
            (0.00000171915, 5.56318632797, 213.3472795478),
            (0.00000169865, 2.8566755401, 99.1606209555),
            (0.00000214398, 4.20253525974, 2531.1349572528),
            (0.0000017201, 2.36537801012, 213.2509113282),
            (0.00000165707, 2.63679789706, 215.7467759928),
            (0.00000230892, 5.49463421262, 191.9584544356),
            (0.00000177585, 0.38155817719, 430.5303441391),
            (0.00000191514, 2.95906900704, 437.6438911399),
            (0.0000016325, 3.4583251728, 617.8058857862),
            (0.00000162305, 5.73050678664, 203.0041546995),
            (0.00000175108, 5.71404465044, 1066.49547719),
            (0.00000183041, 5.66851947172, 2111.6503133776),
            (0.00000150077, 4.40663921925, 417.0369633204),
            (0.00000187935, 6.07916265661, 563.6312150384),
            (0.00000145127, 5.08176368814, 423.4167971383),
            (0.00000137491, 5.43912787991, 222.8603229936),
            (0.00000172824, 1.8492099409, 1589.0728952838),
            (0.00000165478, 2.89132196119, 214.2623032845),
            (0.00000145727, 1.56565192483, 831.8557407496),
            (0.00000176864, 2.30323752987, 9999.986450773),
            (0.00000128877, 2.55338644107, 414.0680179038),
            (0.00000120093, 0.04329750542, 1361.5467058442),
            (0.00000143441, 0.9981735772, 76.2660712756),
            (0.00000108747, 2.09282278191, 207.6700211455),
            (0.00000132106, 2.85902597898, 312.4597163935),
            (0.00000112238, 0.26221759151, 2104.5367663768),
            (0.00000125186, 4.78354048063, 205.2223405907),
            (0.00000104427, 3.63671899047, 65.2203710117),
            (0.00000107447, 3.67064138701, 212.7778305762),
            (0.00000108642, 2.85492389024, 21.3406410024),
            (0.00000097743, 5.12231845599, 2634.2277314714),
            (0.00000109097, 1.63231061493, 208.633228992),
            (0.00000096852, 4.19928280035, 305.3461693927),
            (0.00000096507, 2.56002066845, 1692.1656695024),
            (0.00000085829, 4.54545085982, 210.3783341312),
            (0.00000099249, 5.13816222131, 1574.8458012822),
            (0.00000112532, 5.03109281265, 703.6331846174),
            (0.00000084023, 1.18337717265, 429.7795846137),
            (0.00000089021, 5.38791571457, 107.0249274817),
            (0.00000110191, 2.43656081234, 355.7487455718),
            (0.00000090659, 4.20908809746, 213.8203602998),
            (0.00000095885, 5.44594259071, 2428.0421830342),
            (0.00000094109, 2.39786381418, 483.2205421786),
            (0.00000085609, 0.03354346966, 860.3099287528),
            (0.00000088796, 4.0576630675, 128.9562693151),
            (0.00000081951, 1.66499731549, 62.2514255951),
            (0.0000009124, 3.96942332591, 2847.5268269094),
            (0.00000083961, 4.60845858022, 177.8743727859),
            (0.00000088376, 3.86800515885, 140.001969579),
            (0.00000093308, 0.73846639887, 831.1049812242),
            (0.00000091872, 2.9497760532, 35.4247226521),
            (0.00000087077, 1.33390590052, 1905.4647649404),
            (0.00000096584, 4.84438390997, 131.4039498699),
            (0.0000007101, 0.99334817658, 405.2575498736),
            (0.00000095266, 2.51506908152, 2.4476805548),
            (0.00000072514, 4.63213873657, 245.5424243524),
            (0.0000008258, 1.52823217919, 145.6310438715),
            (0.00000076693, 3.15240783008, 767.3690829208),
            (0.00000070317, 4.0425370727, 173.9422195228),
            (0.00000086015, 2.3010372727, 85.8272988312),
            (0.00000066529, 4.75053522835, 70.8494453042),
            (0.00000065835, 2.46869725001, 280.9671470045),
            (0.00000064824, 0.09343869325, 9.5612275556),
            (0.00000071557, 0.01212415296, 565.1156877467),
            (0.00000066533, 1.08034871114, 339.2864193365),
            (0.00000063488, 2.01740971153, 234.6397364404),
            (0.00000060786, 5.12026947473, 756.3233826569),
            (0.00000058123, 6.05732868566, 1677.9385755008),
            (0.00000064236, 1.28586474622, 1148.2476104062),
            (0.00000073124, 4.37810889148, 425.1137181677),
            (0.00000055012, 3.85865703217, 342.2553647531),
            (0.00000057101, 6.26689214029, 2420.9286360334),
            (0.0000006409, 4.09854757476, 327.4375699205),
            (0.00000055306, 1.60456896521, 543.0242872189),
            (0.00000057987, 5.4726912434, 347.8844390456),
            (0.00000073581, 3.72292337326, 92.0470739547),
            (0.0000007376, 3.57045342615, 1.4844727083),
            (0.0000006494, 2.44739629174, 267.4737661858),
            (0.00000054414, 3.71479080197, 344.7030453079),
            (0.00000049783, 3.93453970179, 192.6921676185),
            (0.00000049537, 3.22831070579, 333.657345044),
            (0.00000047539, 3.92925402178, 199.2844497575),
            (0.00000049368, 4.90341763553, 217.491881132),
            (0.00000062711, 4.40120079629, 214.7835681463),
            (0.00000046359, 2.09430260266, 212.5483359126),
            (0.00000046289, 2.6403845348, 10.2949407385),
            (0.00000054335, 1.07179534996, 362.8622925726),
            (0.00000058742, 2.62270940799, 225.8292684102),
            (0.00000048457, 3.15166418511, 216.2198567448),
            (0.00000046316, 4.8622664277, 2950.619601128),
            (0.0000004597, 4.97297391881, 198.321241911),
            (0.00000046678, 2.44960215701, 207.1487562837),
            (0.00000044905, 1.77616995803, 223.5940361765),
            (0.00000044521, 5.55987055442, 264.5048207692),
            (0.00000055914, 4.29520232351, 329.7251917809),
            (0.00000049643, 5.20789299388, 2744.4340526908),
            (0.00000058829, 4.23073947869, 700.6642392008),
            (0.00000052629, 3.7923062907, 343.2185725996),
            (0.00000041532, 0.74488808688, 125.9873238985),
            (0.00000047767, 2.39260015876, 207.8824694666),
            (0.00000056157, 2.07214273531, 124.433415221),
            (0.00000043345, 1.83707598036, 106.2741679563),
            (0.00000039793, 4.00870764324, 12.5301729722),
            (0.00000053882, 4.97905460628, 134.5853436076),
            (0.00000050135, 5.75914508514, 320.3240229197),
            (0.0000004496, 5.35721924134, 218.9281697305),
            (0.00000041089, 4.92252591399, 1891.2376709388),
            (0.00000046509, 2.06623129884, 2008.557539159),
            (0.00000042949, 0.39856812529, 357.4456666012),
            (0.00000037992, 2.06495914285, 247.2393453818),
            (0.00000048733, 5.32762223699, 3127.3133312618),
            (0.00000034583, 5.62555932761, 99.9113804809),
            (0.00000041092, 2.4726489737, 237.6781178262),
            (0.00000040763, 4.08408559215, 621.7380390493),
            (0.00000034213, 0.73077393007, 750.1036075334),
            (0.00000033967, 5.31264617621, 206.233732547),
            (0.00000036509, 1.6882677575, 22.0914005278),
            (0.00000039361, 3.4573071999, 241.6102710893),
            (0.00000034796, 2.24780137629, 487.3651437628),
            (0.00000033049, 4.86593901955, 209.106309744),
            (0.00000032584, 2.22713131846, 319.5732633943),
            (0.00000039035, 3.73870591196, 3163.918696566),
            (0.00000032722, 1.06640549236, 252.6559713532),
            (0.00000038671, 4.39617126814, 18.1592472647),
            (0.00000034514, 1.8260750069, 380.12776796),
            (0.00000041539, 0.08136234251, 210.3301500214),
            (0.00000033527, 5.80475568528, 251.4321310758),
            (0.00000031221, 1.96489151107, 244.318584075),
            (0.00000030521, 2.26854188579, 1169.5882514086),
            (0.00000034828, 5.96324553131, 217.964961884),
            (0.00000038481, 4.43707551964, 160.6088973985),
            (0.00000035998, 3.83262381556, 56.6223513026),
            (0.00000031041, 4.89914223233, 144.1465711632),
            (0.00000032342, 3.58191018804, 231.4583427027),
            (0.00000028838, 5.80081031514, 1994.3304451574),
            (0.00000032175, 2.13166877923, 206.1373643274),
            (0.00000032643, 1.93131580544, 98.8999885246),
            (0.00000034917, 5.65276617691, 497.4476361802),
            (0.00000028928, 2.2165328892, 14.977853527),
            (0.00000031569, 3.81846560564, 73.297125859),
            (0.00000032199, 0.9981184629, 1464.6394800628),
            (0.00000029153, 5.98414099408, 2737.32050569),
            (0.00000036706, 4.75493516597, 348.8476468921),
            (0.00000028665, 1.68732054583, 78.7137518304),
            (0.00000027501, 6.12086395418, 214.0498549634),
            (0.00000028795, 0.04448605904, 5.6290742925),
            (0.00000027205, 0.24587543816, 313.2104759189),
            (0.00000032441, 3.77921585847, 33.9402499438),
            (0.00000027088, 5.2031009802, 148.0787244263),
            (0.00000034956, 3.43886187587, 273.1028404783),
            (0.00000033076, 2.44662095168, 969.6224780949),
            (0.00000027745, 1.44598606685, 258.8757464767),
            (0.00000027178, 4.2591859622, 179.3588454942),
            (0.00000027872, 0.78772093522, 546.956440482),
            (0.00000029106, 4.83947711462, 905.8865797915),
            (0.00000027417, 2.44930366818, 254.9435932136),
            (0.00000034296, 6.00920969644, 166.828672522),
            (0.00000028859, 6.0291724991, 188.9200730498),
            (0.00000026001, 0.65046992484, 654.1243803156),
            (0.0000003356, 1.23732329127, 2221.856634597),
            (0.00000024356, 0.5224875133, 894.8408795276),
            (0.00000027767, 5.17820678484, 5.4166259714),
            (0.00000025568, 3.35897159622, 0.9632078465),
            (0.00000022879, 3.5129348069, 458.8415197904),
            (0.00000024496, 0.00976884124, 69.1525242748),
            (0.00000028794, 0.75545700854, 488.8496164711),
            (0.00000031228, 2.05299907796, 282.4516197128),
            (0.00000025438, 5.2903772925, 636.7158925763),
            (0.00000025332, 4.9700796945, 3060.8259223474),
            (0.00000023596, 2.54766434769, 196.6243208816),
            (0.00000029602, 3.92688207792, 206.706813299),
            (0.00000028255, 2.72125009693, 32.2433289144),
            (0.00000022115, 4.75775237642, 213.1872208534),
            (0.0000002213, 3.25436709191, 681.5417840896),
            (0.00000021675, 4.61403328597, 3267.0114707846),
            (0.00000022115, 3.16759500067, 213.4109700226),
            (0.00000026912, 2.86269769133, 24.3790223882),
            (0.00000020737, 1.66895754198, 274.0660483248),
            (0.00000028309, 4.73122154345, 552.5855147745),
            (0.00000025252, 5.11986371899, 168.0525127994),
            (0.00000026364, 1.59272536419, 491.8185618877),
            (0.00000021995, 0.8807900928, 635.9651330509),
            (0.00000027076, 5.53694832022, 555.5544601911),
            (0.00000019683, 2.14388519695, 54.1746707478),
            (0.00000027266, 3.57891326986, 561.1835344836),
            (0.00000025162, 1.78070903718, 182.279606801),
            (0.00000021386, 3.86030772476, 116.4260963429),
            (0.00000025572, 1.62093861709, 2324.9494088156),
            (0.00000020025, 2.90618582553, 120.358249606),
            (0.00000019882, 5.59203696008, 4.192785694),
            (0.00000019454, 0.10623632006, 218.7157214094),
            (0.00000025617, 2.09931460158, 248.7238180901),
            (0.00000019804, 2.52180124343, 1485.9801210652),
            (0.00000018516, 2.54810951896, 213.5115437591),
            (0.00000019831, 0.07955320843, 842.1506814881),
            (0.00000018516, 5.3775511051, 213.0866471169),
            (0.00000023655, 1.59974907716, 738.7972748386),
            (0.00000020375, 2.94653107321, 59.8037450403),
            (0.00000024247, 3.15387696867, 240.3864308119),
            (0.00000018294, 3.18715992969, 295.0512286542),
            (0.00000017464, 2.90471803626, 477.8039162072),
            (0.00000020698, 1.07232100334, 494.2662424425),
            (0.000000204, 1.83665590916, 533.6231183577),
            (0.00000021285, 0.63341794388, 189.7232222019),
            (0.00000016116, 0.60069688498, 746.9222137957),
            (0.00000016297, 3.98317294128, 2.9207613068),
            (0.00000016922, 4.74266972033, 2207.6295405954),
            (0.00000020479, 6.05098286202, 173.6815870919),
            (0.00000015447, 1.49120311247, 543.9180590962),
            (0.00000019944, 4.9408663275, 121.2520214833),
            (0.00000017127, 0.71458025372, 1781.0313497194),
            (0.0000001724, 0.67749766724, 151.0476698429),
            (0.00000015574, 5.70296527381, 3053.7123753466),
            (0.00000015036, 5.52770334605, 2310.722314814),
            (0.00000015928, 4.45642717299, 643.8294395771),
            (0.00000016165, 0.63286131026, 358.9301393095),
            (0.00000014589, 5.26158292613, 472.1748419147),
            (0.00000016545, 3.52813228069, 3480.3105662226),
            (0.00000018912, 0.55218675639, 4.665866446),
            (0.00000017595, 2.26495491189, 672.1406152284),
            (0.00000018104, 2.71285673689, 181.806526049),
            (0.00000015918, 5.23446779429, 135.5485514541),
            (0.00000013931, 3.19357128657, 213.5597278689),
            (0.00000014058, 0.82375896652, 221.3758502853),
            (0.00000013931, 4.73208739639, 213.0384630071),
            (0.0000001469, 2.65882838685, 292.0128472684),
            (0.00000014454, 0.21819892811, 235.3904959658),
            (0.00000016168, 0.91025406068, 280.003939158),
            (0.00000013327, 3.54947442109, 205.6642835754),
            (0.00000016104, 0.82547975762, 176.6505325085),
            (0.00000016441, 5.39398801335, 424.1505103212),
            (0.00000012747, 0.75780958758, 721.6494195302),
            (0.00000012754, 3.55466871752, 153.4953503977),
            (0.00000014448, 0.12049617049, 313.6835566709),
            (0.00000016499, 3.26383140489, 6283.0758499914),
            (0.00000016564, 1.62649604519, 5856.4776591154),
            (0.0000001495, 1.23923264394, 2641.3412784722),
            (0.00000015724, 1.18874754834, 486.4019359163),
            (0.00000011893, 0.91693668558, 416.3032501375),
            (0.00000011684, 1.11385455828, 81.7521332162),
            (0.00000012985, 4.74373293725, 3377.217792004),
            (0.00000011864, 0.64411806416, 28.3111756513),
            (0.00000013216, 4.9590402443, 1279.794572628),
            (0.00000016121, 0.98185208328, 2538.2485042536),
            (0.000000149, 1.76649832526, 569.0478410098),
            (0.00000011337, 4.36555105334, 3583.4033404412),
            (0.00000011253, 5.98638731448, 193.655375465),
            (0.00000014753, 2.92291248767, 167.0893049529),
            (0.00000013774, 2.50808183571, 1802.3719907218),
            (0.00000011068, 0.00471764868, 629.6023455755),
            (0.00000012781, 3.62178749219, 67.6680515665),
            (0.00000012238, 0.27163151602, 1044.4040766622),
            (0.00000011021, 0.15223056578, 501.3797894433),
            (0.00000014206, 2.63254885854, 618.5566453116),
            (0.00000014365, 0.37819794671, 601.7642506762),
            (0.00000015034, 2.67095006272, 46.470422916),
            (0.00000012248, 2.19751851112, 650.9429865779),
            (0.00000010783, 2.86375137884, 113.3877149571),
            (0.00000011418, 1.20874560246, 172.2452984934),
            (0.00000014613, 6.05645353059, 468.2426886516),
            (0.0000001058, 2.05903854864, 429.0458714308),
            (0.00000013721, 2.20936291526, 228.276948965),
            (0.0000001218, 1.82585577726, 241.8709035202),
            (0.00000010787, 5.06924118186, 162.8965192589),
            (0.00000012056, 3.20018724042, 72.0732855816),
            (0.00000012233, 4.5074193097, 425.6349830295),
            (0.00000012101, 4.14977794161, 1108.1399749656),
            (0.00000010287, 2.10680007784, 1033.3583763983),
            (0.00000010746, 4.66838299108, 129.9194771616),
            (0.00000012961, 5.11568581806, 219.4494345923),
            (0.00000012302, 5.335685477, 776.9303104764),
            (0.00000011441, 3.85769732764, 405.9912630565),
            (0.00000010112, 2.7648687563, 210.5907824523),
            (0.00000010816, 1.36864298163, 170.7608257851),
            (0.00000010187, 2.36063948382, 685.4739373527),
            (0.00000012397, 6.06349943525, 875.830299001),
            (0.00000012146, 2.04060386262, 508.3503240922),
            (0.00000010193, 4.01123146905, 381.3516082374),
            (0.00000010052, 5.1610725104, 216.0074084237),
            (0.00000010033, 5.97497644283, 6.1503391543),
            (0.00000011661, 0.95163302252, 694.0719570618),
            (0.00000010763, 0.05616402982, 691.1030116452),
        ),
        # R1
        (
            (0.06182981282, 0.25843515034, 213.299095438),
            (0.00506577574, 0.71114650941, 206.1855484372),
            (0.00341394136, 5.7963577396, 426.598190876),
            (0.00188491375, 0.47215719444, 220.4126424388),
            (0.0018626154, 3.14159265359, 0.0),
            (0.00143891176, 1.40744864239, 7.1135470008),
            (0.00049621111, 6.0174446958, 103.0927742186),
            (0.00020928189, 5.0924565447, 639.897286314),
            (0.00019952612, 1.17560125007, 419.4846438752),
            (0.00018839639, 1.60819563173, 110.2063212194),
            (0.00012892827, 5.94330258435, 433.7117378768),
            (0.00013876565, 0.75886204364, 199.0720014364),
            (0.00005396699, 1.28852405908, 14.2270940016),
            (0.00004869308, 0.86793894213, 323.5054166574),
            (0.00004247455, 0.39299384543, 227.5261894396),
            (0.00003252084, 1.25853470491, 95.9792272178),
            (0.00002856006, 2.16731405366, 735.8765135318),
            (0.00002909411, 4.60679154788, 202.2533951741),
            (0.00003081408, 3.43662557418, 522.5774180938),
            (0.00001987689, 2.45054204795, 412.3710968744),
            (0.00001941309, 6.02393385142, 209.3669421749),
            (0.00001581446, 1.29191789712, 210.1177017003),
            (0.00001339511, 4.30801821806, 853.196381752),
            (0.0000131559, 1.25296446023, 117.3198682202),
            (0.00001203085, 1.86654673794, 316.3918696566),
            (0.00001091088, 0.07527246854, 216.4804891757),
            (0.00000954403, 5.15173410519, 647.0108333148),
            (0.00000966012, 0.47991379141, 632.7837393132),
            (0.00000881827, 1.88471724478, 1052.2683831884),
            (0.00000874215, 1.40224683864, 224.3447957019),
            (0.00000897512, 0.98343776092, 529.6909650946),
            (0.00000784866, 3.06377517461, 838.9692877504),
            (0.00000739892, 1.38225356694, 625.6701923124),
            (0.00000612961, 3.03307306767, 63.7358983034),
            (0.0000065821, 4.1436293098, 309.2783226558),
            (0.000006496, 1.7248948616, 742.9900605326),
            (0.00000599236, 2.54924174765, 217.2312487011),
            (0.00000502886, 2.12958819475, 3.9321532631),
            (0.00000413017, 4.59334402271, 415.5524906121),
            (0.00000356117, 2.30312127651, 728.762966531),
            (0.00000344777, 5.88787577835, 440.8252848776),
            (0.00000395004, 0.53349091102, 956.2891559706),
            (0.00000335526, 1.61614647174, 1368.660252845),
            (0.00000362772, 4.70691652867, 302.164775655),
            (0.00000321611, 0.97931764923, 3.1813937377),
            (0.00000277783, 0.26007031431, 195.1398481733),
            (0.00000291173, 2.83129427918, 1155.361157407),
            (0.00000264971, 2.42670902733, 88.865680217),
            (0.00000264864, 5.82860588985, 149.5631971346),
            (0.00000316777, 3.58395655749, 515.463871093),
            (0.00000294324, 2.81632778983, 11.0457002639),
            (0.00000244864, 1.04493438899, 942.062061969),
            (0.00000215368, 3.56535574833, 490.3340891794),
            (0.00000264047, 1.28547685567, 1059.3819301892),
            (0.00000246245, 0.90730313861, 191.9584544356),
            (0.00000222077, 5.1319321205, 269.9214467406),
            (0.00000194973, 4.56665009915, 846.0828347512),
            (0.00000182802, 2.67913220473, 127.4717966068),
            (0.00000181645, 4.93431600689, 74.7815985673),
            (0.00000174651, 3.44560172182, 137.0330241624),
            (0.00000165515, 5.99775895715, 536.8045120954),
            (0.00000154809, 1.19720845085, 265.9892934775),
            (0.00000169743, 4.63464467495, 284.1485407422),
            (0.00000151526, 0.52928231044, 330.6189636582),
            (0.00000152461, 5.43886711695, 422.6660376129),
            (0.00000157687, 2.99559914619, 340.7708920448),
            (0.0000014063, 2.02069760726, 1045.1548361876),
            (0.00000139834, 1.3528295939, 1685.0521225016),
            (0.00000140977, 1.27099900689, 203.0041546995),
            (0.00000136013, 5.01678984678, 351.8165923087),
            (0.00000153391, 0.26968607873, 1272.6810256272),
            (0.00000129476, 1.14344730612, 21.3406410024),
            (0.00000127831, 2.53876158952, 1471.7530270636),
            (0.00000126538, 3.00310970076, 277.0349937414),
            (0.00000100277, 3.61360169153, 1066.49547719),
            (0.00000103169, 0.38175114761, 203.7378678824),
            (0.00000107527, 4.31870663477, 210.8514148832),
            (0.00000095934, 0.79463744168, 1258.4539316256),
            (0.00000082663, 0.28181414606, 234.6397364404),
            (0.00000097986, 2.56085956186, 191.2076949102),
            (0.00000097389, 3.26245865063, 831.8557407496),
            (0.00000072227, 4.3798463038, 860.3099287528),
            (0.00000070639, 0.7319151392, 437.6438911399),
            (0.00000070447, 0.87698401733, 423.4167971383),
            (0.00000072057, 5.58013290518, 429.7795846137),
            (0.00000073332, 0.62505906432, 1375.7737998458),
            (0.00000066433, 2.68414462465, 405.2575498736),
            (0.00000063812, 1.7505149818, 1361.5467058442),
            (0.00000061601, 1.09332288242, 2001.4439921582),
            (0.00000067006, 0.06872766216, 408.4389436113),
            (0.00000068945, 2.47127505057, 949.1756089698),
            (0.00000060456, 2.25094790113, 1788.1448967202),
            (0.00000067074, 5.45365870159, 200.7689224658),
            (0.00000065579, 0.05539079332, 1589.0728952838),
            (0.0000004932, 4.17243429807, 138.5174968707),
            (0.00000050648, 6.26867505289, 223.5940361765),
            (0.00000055166, 4.59491533823, 628.8515860501),
            (0.00000047916, 0.83929741626, 10.2949407385),
            (0.00000046691, 2.17322569098, 312.1990839626),
            (0.00000054179, 0.28360076018, 124.433415221),
            (0.00000049511, 3.79960349195, 215.7467759928),
            (0.00000040136, 5.18161452756, 1478.8665740644),
            (0.00000039302, 0.56257369109, 1574.8458012822),
            (0.00000034962, 4.68487505703, 38.1330356378),
            (0.0000004277, 2.98582069454, 1148.2476104062),
            (0.00000036521, 0.63453270366, 52.6901980395),
            (0.00000039752, 0.28412706854, 131.4039498699),
            (0.00000031777, 5.19036499973, 76.2660712756),
            (0.00000033041, 1.9796484643, 142.4496501338),
            (0.00000042053, 4.830179518, 288.0806940053),
            (0.00000030757, 1.47903923433, 1677.9385755008),
            (0.00000042829, 3.38225543528, 208.633228992),
            (0.00000029245, 5.09869866956, 654.1243803156),
            (0.00000029165, 4.95664881649, 1795.258443721),
            (0.00000029136, 2.74747553685, 404.5067903482),
            (0.00000032689, 6.12099521344, 145.6310438715),
            (0.00000028008, 0.83185907283, 2317.8358618148),
            (0.00000027725, 2.24364073545, 430.5303441391),
            (0.00000029939, 1.96415498448, 2104.5367663768),
            (0.00000032982, 3.28236160491, 222.8603229936),
            (0.00000031772, 6.02453027348, 1905.4647649404),
            (0.00000026959, 5.24308283338, 388.4651552382),
            (0.00000026514, 0.99638302878, 107.0249274817),
            (0.00000025421, 2.87336642463, 703.6331846174),
            (0.00000024908, 1.07713811775, 99.9113804809),
            (0.00000024955, 6.23974037842, 106.2741679563),
            (0.00000024894, 0.81040976807, 312.4597163935),
            (0.0000002434, 0.54867402916, 214.2623032845),
            (0.00000028441, 0.82630052794, 1692.1656695024),
            (0.00000023219, 5.07995629354, 479.2883889155),
            (0.00000024362, 3.10643455533, 212.3358875915),
            (0.00000021951, 6.06688237952, 85.8272988312),
            (0.00000022046, 3.89863665506, 563.6312150384),
            (0.00000022596, 4.86725457223, 295.0512286542),
            (0.00000021256, 5.10797617452, 333.657345044),
            (0.00000025985, 2.20813879137, 1265.5674786264),
            (0.00000020904, 3.28855303434, 70.8494453042),
            (0.00000021505, 3.79541155976, 347.8844390456),
            (0.00000022067, 4.22716352578, 217.964961884),
            (0.00000020629, 1.68732248608, 231.4583427027),
            (0.00000021429, 3.08914428467, 554.0699874828),
            (0.0000002131, 0.38868340861, 319.5732633943),
            (0.00000020521, 2.45651851283, 18.1592472647),
            (0.00000026055, 4.27554951169, 483.2205421786),
            (0.00000020703, 5.1205793632, 362.8622925726),
            (0.00000022047, 5.51249354809, 343.2185725996),
            (0.00000019443, 2.02441679295, 313.2104759189),
            (0.00000020163, 5.0848137311, 750.1036075334),
            (0.00000020125, 3.42997916125, 213.3472795478),
            (0.00000024196, 0.64787472796, 207.8824694666),
            (0.00000021977, 0.72894956852, 99.1606209555),
            (0.0000002112, 2.69286728009, 1464.6394800628),
            (0.00000017192, 4.71525117969, 2111.6503133776),
            (0.0000001854, 0.04817255506, 245.5424243524),
            (0.00000017521, 3.83662880684, 497.4476361802),
            (0.00000016107, 4.22374822303, 565.1156877467),
            (0.00000021607, 4.16647257628, 2.4476805548),
            (0.00000015979, 0.27376396113, 225.8292684102),
            (0.00000016831, 1.41134653939, 114.1384744825),
            (0.00000015626, 2.82768623405, 81.7521332162),
            (0.00000015499, 1.20606390539, 1994.3304451574),
            (0.00000015168, 3.84591816174, 1162.4747044078),
            (0.00000016436, 3.04752365976, 134.5853436076),
            (0.0000001587, 0.33026420429, 1891.2376709388),
            (0.0000002037, 0.23170286692, 213.2509113282),
            (0.00000016291, 1.70643197929, 2420.9286360334),
            (0.0000001628, 4.9415942732, 357.4456666012),
            (0.00000018076, 5.69515344123, 56.6223513026),
            (0.00000013724, 0.5724019003, 2634.2277314714),
            (0.00000017355, 3.55311137444, 218.9281697305),
            (0.0000001374, 5.70545527289, 92.0470739547),
            (0.00000015328, 1.3133869285, 216.2198567448),
            (0.00000012538, 5.19222019427, 635.9651330509),
            (0.00000012815, 1.6015113087, 320.3240229197),
            (0.00000013043, 0.45068441373, 1169.5882514086),
            (0.00000011984, 5.9491612357, 543.9180590962),
            (0.00000011753, 2.80279347133, 217.491881132),
            (0.00000014746, 5.56520105813, 344.7030453079),
            (0.00000012762, 1.63557330778, 273.1028404783),
            (0.00000011855, 2.46234840263, 721.6494195302),
            (0.00000013309, 5.75641013916, 2221.856634597),
            (0.00000014471, 0.45316163629, 2008.557539159),
            (0.0000001184, 1.7572077238, 160.6088973985),
            (0.00000012374, 1.01456317602, 329.7251917809),
            (0.00000010747, 1.58065203003, 212.7778305762),
            (0.00000012758, 1.9195237324, 1581.959348283),
            (0.00000011944, 4.44720922423, 32.2433289144),
            (0.00000011865, 5.10696147162, 4.665866446),
            (0.00000011861, 4.30847607078, 618.5566453116),
            (0.00000010036, 0.48709852137, 305.3461693927),
            (0.00000012777, 3.74412991331, 508.3503240922),
            (0.00000010677, 0.76645916273, 218.7157214094),
            (0.00000011351, 3.00009819697, 198.321241911),
            (0.00000010249, 2.40923650192, 546.956440482),
            (0.00000012767, 3.43273835457, 258.8757464767),
            (0.00000011163, 2.40665325234, 1781.0313497194),
            (0.00000010608, 2.0748002083, 213.8203602998),
            (0.00000011263, 1.89402915826, 561.1835344836),
            (0.00000010157, 0.09037368733, 182.279606801),
            (0.00000011807, 3.71278037583, 350.3321196004),
        ),
        # R2
        (
            (0.00436902464, 4.78671673044, 213.299095438),
            (0.0007192276, 2.50069994874, 206.1855484372),
            (0.00049766792, 4.9716815087, 220.4126424388),
            (0.00043220894, 3.86940443794, 426.598190876),
            (0.00029645554, 5.96310264282, 7.1135470008),
            (0.0000414165, 4.10670940823, 433.7117378768),
            (0.00004720909, 2.47527992423, 199.0720014364),
            (0.0000378937, 3.09771025067, 639.897286314),
            (0.0000296399, 1.37206248846, 103.0927742186),
            (0.00002556363, 2.85065721526, 419.4846438752),
            (0.00002208457, 6.27588858707, 110.2063212194),
            (0.00002187621, 5.85545832218, 14.2270940016),
            (0.00001956896, 4.92448618045, 227.5261894396),
            (0.00002326801, 0.0, 0.0),
            (0.0000092384, 5.46392422737, 323.5054166574),
            (0.00000705936, 2.97081280098, 95.9792272178),
            (0.00000546115, 4.12854181522, 412.3710968744),
            (0.00000373838, 5.83435991809, 117.3198682202),
            (0.00000360882, 3.27703082368, 647.0108333148),
            (0.0000035635, 3.19152043942, 210.1177017003),
            (0.00000390627, 4.48106176893, 216.4804891757),
            (0.00000431485, 5.17825414612, 522.5774180938),
            (0.00000325598, 2.26867601656, 853.196381752),
            (0.00000405018, 4.17294157872, 209.3669421749),
            (0.00000204494, 0.0877484859, 202.2533951741),
            (0.00000206854, 4.02188336738, 735.8765135318),
            (0.00000178474, 4.09716541453, 440.8252848776),
            (0.00000180143, 3.59704903955, 632.7837393132),
            (0.00000153656, 3.13470530382, 625.6701923124),
            (0.00000147779, 0.13614300541, 302.164775655),
            (0.00000123189, 4.18895309647, 88.865680217),
            (0.00000133076, 2.5935046942, 191.9584544356),
            (0.00000100367, 5.46056190585, 3.1813937377),
            (0.00000131975, 5.93293968941, 309.2783226558),
            (0.00000097235, 4.01832604356, 728.762966531),
            (0.00000110709, 4.77853798276, 838.9692877504),
            (0.00000119053, 5.55385105975, 224.3447957019),
            (0.00000093852, 4.38395529912, 217.2312487011),
            (0.00000108701, 5.29310899841, 515.463871093),
            (0.00000078609, 5.72525447528, 21.3406410024),
            (0.00000081468, 5.10897365253, 956.2891559706),
            (0.00000096412, 6.25859229567, 742.9900605326),
            (0.00000069228, 4.04901237761, 3.9321532631),
            (0.00000065168, 3.77713343518, 1052.2683831884),
            (0.00000064088, 5.81235002453, 529.6909650946),
            (0.00000062541, 2.18445116349, 195.1398481733),
            (0.00000056987, 3.14666549033, 203.0041546995),
            (0.00000055979, 4.8410842286, 234.6397364404),
            (0.0000005294, 5.07780548444, 330.6189636582),
            (0.00000050635, 2.77318570728, 942.062061969),
            (0.00000041649, 4.79014211005, 63.7358983034),
            (0.00000044858, 0.56460613593, 269.9214467406),
            (0.00000041357, 3.73496404402, 316.3918696566),
            (0.00000052847, 3.92623831484, 949.1756089698),
            (0.00000038398, 3.73966157784, 1045.1548361876),
            (0.00000037583, 4.18924633757, 536.8045120954),
            (0.00000035285, 2.90795856092, 284.1485407422),
            (0.00000033576, 3.80465978802, 149.5631971346),
            (0.00000041073, 4.57870454147, 1155.361157407),
            (0.00000030412, 2.48140171991, 860.3099287528),
            (0.00000031373, 4.84075951849, 1272.6810256272),
            (0.00000030218, 4.3518629447, 405.2575498736),
            (0.0000003943, 3.50858482049, 422.6660376129),
            (0.00000029658, 1.58886982096, 1066.49547719),
            (0.00000035202, 5.94478241578, 1059.3819301892),
            (0.00000025829, 3.54946335477, 1368.660252845),
            (0.00000026283, 4.81567477177, 124.433415221),
            (0.00000029963, 3.66312205813, 429.7795846137),
            (0.00000033011, 4.96879544579, 831.8557407496),
            (0.00000024305, 5.31133255082, 10.2949407385),
            (0.00000026332, 4.4525327339, 223.5940361765),
            (0.00000022108, 2.76092021113, 415.5524906121),
            (0.00000027187, 1.66347897738, 277.0349937414),
            (0.00000021639, 1.03836302307, 11.0457002639),
            (0.00000019713, 2.52194629263, 1258.4539316256),
            (0.00000017062, 3.27669927228, 654.1243803156),
            (0.00000017261, 3.49414816663, 1361.5467058442),
            (0.00000016097, 1.73396878598, 490.3340891794),
            (0.00000021099, 3.62102032955, 1265.5674786264),
            (0.00000017692, 4.31141612385, 1471.7530270636),
            (0.00000013458, 0.32327889681, 295.0512286542),
            (0.00000012586, 3.13794576887, 74.7815985673),
            (0.00000012023, 2.32917797741, 210.8514148832),
            (0.0000001512, 3.59558424278, 265.9892934775),
            (0.00000012959, 4.62359706368, 1589.0728952838),
            (0.00000015424, 5.01335704925, 127.4717966068),
            (0.00000011193, 4.54981248285, 81.7521332162),
            (0.00000013449, 4.88710089777, 437.6438911399),
            (0.00000010673, 5.05234757424, 191.2076949102),
            (0.00000013963, 3.04990968366, 423.4167971383),
            (0.00000010614, 5.02845923229, 137.0330241624),
            (0.00000014382, 4.68720080027, 1148.2476104062),
            (0.0000001347, 1.90280407135, 408.4389436113),
            (0.00000010077, 5.20426583827, 340.7708920448),
            (0.00000010323, 3.34460279759, 1685.0521225016),
            (0.00000011295, 5.47808960704, 1375.7737998458),
        ),
        # R3
        (
            (0.00020315005, 3.02186626038, 213.299095438),
            (0.00008923581, 3.19144205755, 220.4126424388),
            (0.00006908677, 4.35174889353, 206.1855484372),
            (0.00004087129, 4.22406927376, 7.1135470008),
            (0.00003879041, 2.01056445995, 426.598190876),
            (0.00001070788, 4.20360341236, 199.0720014364),
            (0.00000907332, 2.28344368029, 433.7117378768),
            (0.00000606121, 3.17458570534, 227.5261894396),
            (0.00000596639, 4.13455753351, 14.2270940016),
            (0.00000483181, 1.17345973258, 639.897286314),
            (0.00000393174, 0.0, 0.0),
            (0.00000229472, 4.69838526383, 419.4846438752),
            (0.0000018825, 4.59003889007, 110.2063212194),
            (0.00000149508, 3.201994444, 103.0927742186),
            (0.00000121442, 3.76831374104, 323.5054166574),
            (0.00000101215, 5.81884137755, 412.3710968744),
            (0.00000102146, 4.70974422803, 95.9792272178),
            (0.00000093078, 1.43531270909, 647.0108333148),
            (0.00000072601, 4.15395598507, 117.3198682202),
            (0.00000084347, 2.63462379693, 216.4804891757),
            (0.00000062198, 2.31239345505, 440.8252848776),
            (0.00000045145, 4.37317047297, 191.9584544356),
            (0.00000049536, 2.38854232908, 209.3669421749),
            (0.00000054829, 0.30526468471, 853.196381752),
            (0.00000040498, 1.83836569765, 302.164775655),
            (0.00000038089, 5.94455115525, 88.865680217),
            (0.00000032243, 4.01146349387, 21.3406410024),
            (0.00000040671, 0.6884518321, 522.5774180938),
            (0.00000028209, 5.77193013961, 210.1177017003),
            (0.00000024976, 3.06249709014, 234.6397364404),
            (0.00000020824, 4.92570695678, 625.6701923124),
            (0.0000002507, 0.73137425284, 515.463871093),
            (0.00000017485, 5.73135068691, 728.762966531),
            (0.00000018009, 1.45593152612, 309.2783226558),
            (0.00000016927, 3.52771580455, 3.1813937377),
            (0.00000013437, 3.36479898106, 330.6189636582),
            (0.0000001109, 3.37212682914, 224.3447957019),
            (0.00000011082, 3.41719974793, 956.2891559706),
            (0.00000011551, 5.99093726182, 735.8765135318),
            (0.000000105, 6.06911092266, 405.2575498736),
            (0.00000010023, 0.58247011625, 860.3099287528),
            (0.00000010091, 0.28268774007, 838.9692877504),
        ),
        # R4
        (
            (0.0000120205, 1.41499446465, 220.4126424388),
            (0.00000707796, 1.16153570102, 213.299095438),
            (0.00000516121, 6.2397356833, 206.1855484372),
            (0.00000426664, 2.46924890293, 7.1135470008),
            (0.00000267736, 0.18659206741, 426.598190876),
            (0.00000170171, 5.95926972384, 199.0720014364),
            (0.00000145113, 1.44211060143, 227.5261894396),
            (0.00000150339, 0.4797016714, 433.7117378768),
            (0.00000121033, 2.40527320817, 14.2270940016),
            (0.00000047332, 5.56857488676, 639.897286314),
            (0.00000015745, 2.90112466278, 110.2063212194),
            (0.00000016668, 0.52920774279, 440.8252848776),
            (0.00000018954, 5.85626429118, 647.0108333148),
            (0.00000014074, 1.30343550656, 412.3710968744),
            (0.00000012708, 2.09349305926, 323.5054166574),
            (0.00000014724, 0.29905316786, 419.4846438752),
            (0.00000011133, 2.4630482599, 117.3198682202),
            (0.0000001132, 0.21785507019, 95.9792272178),
        ),
        # R5
        (
            (0.00000128612, 5.91282565136, 220.4126424388),
            (0.00000032273, 0.69256228602, 7.1135470008),
            (0.00000026698, 5.91428528629, 227.5261894396),
            (0.00000019923, 0.67370653385, 14.2270940016),
            (0.00000020223, 4.95136801768, 433.7117378768),
            (0.00000013537, 1.45669521408, 199.0720014364),
            (0.00000014097, 2.67074280191, 206.1855484372),
            (0.00000013364, 4.5882699637, 426.598190876),
        ),
    ),
}


URANUS = {
    'L': (
        # L0
        (
            (5.48129294299, 0.0, 0.0),
            (0.09260408252, 0.8910642153, 74.7815985673),
            (0.01504247826, 3.62719262195, 1.4844727083),
            (0.00365981718, 1.89962189068, 73.297125859),
            (0.00272328132, 3.35823710524, 149.5631971346),
            (0.00070328499, 5.39254431993, 63.7358983034),
            (0.00068892609, 6.09292489045, 76.2660712756),
            (0.00061998592, 2.26952040469, 2.9689454166),
            (0.00061950714, 2.85098907565, 11.0457002639),
            (0.00026468869, 3.14152087888, 71.8126531507),
            (0.00025710505, 6.11379842935, 454.9093665273),
            (0.00021078897, 4.36059465144, 148.0787244263),
            (0.00017818665, 1.74436982544, 36.6485629295),
            (0.00014613471, 4.73732047977, 3.9321532631),
            (0.00011162535, 5.82681993692, 224.3447957019),
            (0.00010997934, 0.48865493179, 138.5174968707),
            (0.00009527487, 2.95516893093, 35.1640902212),
            (0.00007545543, 5.23626440666, 109.9456887885),
            (0.0000422017, 3.23328535514, 70.8494453042),
            (0.0000405185, 2.27754158724, 151.0476698429),
            (0.00003354607, 1.06549008887, 4.4534181249),
            (0.00002926671, 4.62903695486, 9.5612275556),
            (0.00003490352, 5.48305567292, 146.594251718),
            (0.00003144093, 4.75199307603, 77.7505439839),
            (0.0000292241, 5.3523674338, 85.8272988312),
            (0.0000227279, 4.36600802756, 70.3281804424),
            (0.00002051209, 1.51773563459, 0.1118745846),
            (0.00002148599, 0.60745800902, 38.1330356378),
            (0.00001991726, 4.92437290826, 277.0349937414),
            (0.00001376208, 2.04281409054, 65.2203710117),
            (0.0000166691, 3.62744580852, 380.12776796),
            (0.00001284183, 3.11346336879, 202.2533951741),
            (0.00001150416, 0.93344454002, 3.1813937377),
            (0.00001533223, 2.58593414266, 52.6901980395),
            (0.00001281641, 0.54269869505, 222.8603229936),
            (0.000013721, 4.19641615561, 111.4301614968),
            (0.00001220998, 0.19901396193, 108.4612160802),
            (0.00000946195, 1.19249463066, 127.4717966068),
            (0.00001150993, 4.17898207045, 33.6796175129),
            (0.00001244342, 0.91612680579, 2.4476805548),
            (0.00001072008, 0.23564502877, 62.2514255951),
            (0.00001090461, 1.77501638912, 12.5301729722),
            (0.00000707875, 5.18285226584, 213.299095438),
            (0.00000653401, 0.96586909116, 78.7137518304),
            (0.00000627562, 0.18210181975, 984.6003316219),
            (0.00000524495, 2.01276706996, 299.1263942692),
            (0.0000055937, 3.35776737704, 0.5212648618),
            (0.00000606827, 5.43209728952, 529.6909650946),
            (0.00000404891, 5.98689011389, 8.0767548473),
            (0.00000467211, 0.41484068933, 145.1097790097),
            (0.00000471288, 1.40664336447, 184.7272873558),
            (0.00000483219, 2.10553990154, 0.9632078465),
            (0.00000395614, 5.87039580949, 351.8165923087),
            (0.00000433532, 5.52142978255, 183.2428146475),
            (0.00000309885, 5.83301304674, 145.6310438715),
            (0.00000378609, 2.34975805006, 56.6223513026),
            (0.00000398996, 0.33810765436, 415.5524906121),
            (0.00000300379, 5.64353974146, 22.0914005278),
            (0.00000249229, 4.74617120584, 225.8292684102),
            (0.00000239334, 2.35045874708, 137.0330241624),
            (0.00000294172, 5.83916826225, 39.6175083461),
            (0.0000021648, 4.77847481363, 340.7708920448),
            (0.00000251792, 1.63696775578, 221.3758502853),
            (0.00000219621, 1.92212987979, 67.6680515665),
            (0.00000201963, 1.29693040865, 0.0481841098),
            (0.00000224097, 0.51574863468, 84.3428261229),
            (0.00000216549, 6.14211862702, 5.9378908332),
            (0.00000222588, 2.84309380331, 0.2606324309),
            (0.00000207828, 5.5802057004, 68.8437077341),
            (0.00000187474, 1.31924326253, 0.1600586944),
            (0.00000158028, 0.73811997211, 54.1746707478),
            (0.00000199146, 0.9563415501, 152.5321425512),
            (0.00000168648, 5.87874000882, 18.1592472647),
            (0.000001703, 3.67717520688, 5.4166259714),
            (0.00000193652, 1.88800122606, 456.3938392356),
            (0.00000192998, 0.91616058506, 453.424893819),
            (0.00000181934, 3.53624029238, 79.2350166922),
            (0.00000173145, 1.53860728054, 160.6088973985),
            (0.00000164588, 1.42379714838, 106.9767433719),
            (0.00000171968, 5.67952685533, 219.891377577),
            (0.00000162792, 3.05029377666, 112.9146342051),
            (0.00000146653, 1.26300172265, 59.8037450403),
            (0.00000139453, 5.385977234, 32.1951448046),
            (0.00000138585, 4.25994786673, 909.8187330546),
            (0.00000143058, 1.29995487555, 35.4247226521),
            (0.0000012384, 1.37359990336, 7.1135470008),
            (0.00000104414, 5.02820888813, 0.7507595254),
            (0.00000103277, 0.68095301267, 14.977853527),
            (0.00000094741, 0.90674090409, 74.6697239827),
            (0.00000082978, 2.92828718445, 265.9892934775),
            (0.00000110163, 2.02685778976, 554.0699874828),
            (0.00000094226, 3.9426632826, 74.8934731519),
            (0.00000079858, 1.0144682918, 6.592282139),
            (0.00000109376, 5.70581833286, 77.962992305),
            (0.00000085876, 1.70649435603, 82.8583534146),
            (0.00000103562, 1.45770270246, 24.3790223882),
            (0.00000074667, 4.63177552576, 69.3649725959),
            (0.00000079919, 3.00974084247, 297.6419215609),
            (0.00000084502, 0.36887189574, 186.2117600641),
            (0.0000008881, 0.52481330563, 181.7583419392),
            (0.00000070303, 1.18986880009, 66.70484372),
            (0.00000069965, 0.87476081875, 305.3461693927),
            (0.00000069927, 3.76102749315, 131.4039498699),
            (0.00000084604, 5.88725183325, 256.5399405065),
            (0.00000074341, 6.24271323846, 447.7958195265),
            (0.0000006231, 0.16901376623, 479.2883889155),
            (0.00000072726, 2.84892775693, 462.0229135281),
            (0.0000006906, 4.43934854374, 39.3568759152),
            (0.00000076568, 4.5872111034, 6.2197751235),
            (0.00000073387, 4.27603448634, 87.3117715395),
            (0.00000055307, 1.49636544147, 71.6002048296),
            (0.00000057291, 1.63015165542, 143.6253063014),
            (0.00000061661, 3.18604743524, 77.2292791221),
            (0.00000057634, 3.67180685401, 51.2057253312),
            (0.00000050289, 1.12279384633, 20.6069278195),
            (0.00000053744, 5.51890986247, 128.9562693151),
            (0.00000057894, 2.66877593418, 381.6122406683),
            (0.00000058112, 1.58629352171, 60.7669528868),
            (0.00000045382, 0.48053933052, 14.0146456805),
            (0.00000037581, 6.06822931932, 211.8146227297),
            (0.0000003864, 3.43597050177, 153.4953503977),
            (0.00000046087, 4.36201639577, 75.7448064138),
            (0.00000040088, 4.57333927519, 46.2097904851),
            (0.00000034229, 2.93967782207, 140.001969579),
            (0.00000038669, 5.58941074168, 99.1606209555),
            (0.00000034827, 1.02792863024, 203.7378678824),
            (0.00000040024, 0.69889667397, 218.4069048687),
            (0.00000032538, 4.21625657443, 200.7689224658),
            (0.00000031865, 5.50961503408, 72.3339180125),
            (0.00000041695, 3.82438031124, 81.0013736908),
            (0.00000034795, 0.39363490236, 1.3725981237),
            (0.00000039775, 6.05600836903, 293.188503436),
            (0.00000027577, 2.18261286374, 125.9873238985),
            (0.00000036279, 1.66586085405, 258.0244132148),
            (0.00000035442, 1.96652806541, 835.0371344873),
            (0.00000035361, 3.7225869003, 692.5874843535),
            (0.00000027323, 2.10164372072, 209.3669421749),
            (0.0000002653, 4.48265986115, 373.9079928365),
            (0.00000034472, 1.07907945481, 191.2076949102),
            (0.00000029915, 3.87358632506, 259.5088859231),
            (0.00000026233, 3.63172504384, 490.3340891794),
            (0.00000025848, 0.54461409359, 41.6444977756),
            (0.00000026989, 6.27711247734, 28.5718080822),
            (0.00000026391, 5.81110061049, 75.3028634291),
            (0.00000034227, 6.05617272657, 275.5505210331),
            (0.00000024279, 3.18776564878, 81.3738807063),
            (0.00000029937, 1.88789751816, 269.9214467406),
            (0.00000026235, 6.20105251336, 134.5853436076),
            (0.00000022754, 0.92919725789, 288.0806940053),
            (0.0000002518, 5.42547381962, 116.4260963429),
            (0.00000022715, 0.53098783687, 1514.2912967165),
            (0.00000026485, 4.77176167929, 284.1485407422),
            (0.00000027008, 4.75281624832, 41.1019810544),
            (0.00000021972, 4.58613057386, 404.5067903482),
            (0.00000022012, 1.84389287183, 617.8058857862),
            (0.00000024694, 4.7087519549, 378.6432952517),
            (0.00000028949, 0.17127584792, 528.2064923863),
            (0.00000020492, 0.10285646641, 195.1398481733),
            (0.00000020696, 5.62143477633, 55.6591434561),
            (0.00000025843, 0.74627159338, 278.5194664497),
            (0.0000002299, 3.58378694661, 1.5963472929),
            (0.00000021843, 0.05733533568, 173.9422195228),
            (0.0000001905, 2.30351091243, 5.1078094307),
            (0.00000020675, 2.64113858585, 105.4922706636),
            (0.00000021856, 5.87352402691, 45.5766510387),
            (0.0000002112, 1.98081790016, 114.3991069134),
            (0.00000019279, 2.84304025179, 159.1244246902),
            (0.00000019061, 0.50598371738, 67.3592350258),
            (0.00000020434, 3.77601951414, 135.5485514541),
            (0.00000017326, 4.47793157645, 120.358249606),
            (0.00000020547, 0.88695598555, 255.0554677982),
            (0.0000001932, 1.48569290504, 0.8937718773),
            (0.00000021331, 2.7447002306, 28.3111756513),
            (0.00000017582, 4.091396367, 296.1574488526),
            (0.00000015918, 3.94525074972, 17.5261078183),
            (0.00000015562, 0.92748407689, 300.6108669775),
            (0.00000016439, 0.30868798605, 30.7106720963),
            (0.00000015237, 4.93048601827, 7.4223635415),
            (0.00000019284, 6.21950083268, 329.8370663655),
            (0.0000001386, 0.56255266406, 144.1465711632),
            (0.00000016206, 2.30292598693, 344.7030453079),
            (0.00000016041, 0.19723295436, 103.0927742186),
            (0.00000014414, 2.57606243208, 230.5645708254),
            (0.00000016789, 4.93540052916, 565.1156877467),
            (0.00000017052, 1.81844925116, 294.6729761443),
            (0.00000016766, 0.2754218633, 73.8183907208),
            (0.00000015428, 1.91577056305, 96.8729990951),
            (0.00000015718, 3.87095025861, 98.8999885246),
            (0.00000011923, 6.17545505441, 44.7253177768),
            (0.00000012407, 6.22419970167, 80.1982245387),
            (0.0000001304, 1.99652993223, 27.0873353739),
            (0.00000013229, 3.43782440072, 227.3137411185),
            (0.00000011669, 4.31526860843, 426.598190876),
            (0.00000014378, 5.78353646474, 1059.3819301892),
            (0.00000015879, 0.98454960055, 6208.2942514241),
            (0.00000011158, 1.7441743069, 220.4126424388),
            (0.00000011989, 5.8438865795, 13.3333221243),
            (0.00000011386, 2.55925734515, 19.1224551112),
            (0.00000013281, 5.39472153462, 391.1734682239),
            (0.00000012295, 4.57340278496, 23.5758732361),
            (0.00000012827, 1.7741026907, 180.2738692309),
            (0.00000011651, 4.29138607818, 142.4496501338),
            (0.00000012248, 2.44241346243, 100.3844612329),
            (0.00000012421, 2.32591770919, 80.7194894005),
            (0.00000013172, 2.74099358938, 177.8743727859),
            (0.00000012262, 5.42795591646, 831.1049812242),
            (0.00000010272, 5.90194483926, 74.5209661364),
            (0.00000010701, 4.00709797731, 235.3904959658),
            (0.00000012066, 5.5216310022, 74.2603337055),
            (0.00000010836, 1.88393779293, 241.6102710893),
            (0.00000010718, 5.50310449842, 187.6962327724),
            (0.00000012057, 6.0212005039, 154.0166152595),
            (0.00000011526, 6.26425302826, 155.7829722581),
            (0.000000122, 5.79400179483, 1364.7280995819),
            (0.00000010979, 5.76614513865, 628.8515860501),
            (0.00000011227, 1.30788626675, 604.4725636619),
            (0.00000010531, 1.05867421534, 291.7040307277),
            (0.00000010291, 5.30493908317, 75.0422309982),
        ),
        # L1
        (
            (75.02543121646, 0.0, 0.0),
            (0.00154458244, 5.24201658072, 74.7815985673),
            (0.00024456413, 1.71255705309, 1.4844727083),
            (0.00009257828, 0.42844639064, 11.0457002639),
            (0.00008265977, 1.5022003511, 63.7358983034),
            (0.00007841715, 1.31983607251, 149.5631971346),
            (0.00003899105, 0.46483574024, 3.9321532631),
            (0.00002283777, 4.17367533997, 76.2660712756),
            (0.000019266, 0.53013080152, 2.9689454166),
            (0.00001232727, 1.58634458237, 70.8494453042),
            (0.00000791206, 5.43641224143, 3.1813937377),
            (0.00000766954, 1.99555409575, 73.297125859),
            (0.00000481671, 2.98401996914, 85.8272988312),
            (0.00000449798, 4.13826237508, 138.5174968707),
            (0.000004456, 3.72300400331, 224.3447957019),
            (0.00000426554, 4.73126059388, 71.8126531507),
            (0.00000347735, 2.45372261286, 9.5612275556),
            (0.00000353752, 2.58324496886, 148.0787244263),
            (0.00000317084, 5.57855232072, 52.6901980395),
            (0.0000017992, 5.68367730922, 12.5301729722),
            (0.00000171084, 3.00060075287, 78.7137518304),
            (0.00000205585, 2.36263144251, 2.4476805548),
            (0.00000158029, 2.90931969498, 0.9632078465),
            (0.00000189068, 4.20242881378, 56.6223513026),
            (0.0000015467, 5.59083925605, 4.4534181249),
            (0.00000183762, 0.28371004654, 151.0476698429),
            (0.00000143464, 2.59049246726, 62.2514255951),
            (0.00000151984, 2.9421732689, 77.7505439839),
            (0.00000153515, 4.65186885939, 35.1640902212),
            (0.00000121452, 4.1483920492, 127.4717966068),
            (0.00000115546, 3.73224603791, 65.2203710117),
            (0.00000102022, 4.18754517993, 145.6310438715),
            (0.00000101718, 6.03385875009, 0.1118745846),
            (0.00000088202, 3.99035787994, 18.1592472647),
            (0.00000087549, 6.15520787584, 202.2533951741),
            (0.0000008053, 2.64124743934, 22.0914005278),
            (0.00000072047, 6.04545933578, 70.3281804424),
            (0.0000006857, 4.05071895264, 77.962992305),
            (0.00000059173, 3.70413919082, 67.6680515665),
            (0.00000047267, 3.54312460519, 351.8165923087),
            (0.00000042534, 5.72357370899, 5.4166259714),
            (0.00000044339, 5.90865821911, 7.1135470008),
            (0.00000035605, 3.29197259183, 8.0767548473),
            (0.00000035524, 3.32784616138, 71.6002048296),
            (0.00000036116, 5.89964278801, 33.6796175129),
            (0.00000030608, 5.46414592601, 160.6088973985),
            (0.00000031454, 5.62015632303, 984.6003316219),
            (0.00000038544, 4.91519003848, 222.8603229936),
            (0.00000034996, 5.08034112149, 38.1330356378),
            (0.00000030811, 5.49591403863, 59.8037450403),
            (0.00000028947, 4.51867390414, 84.3428261229),
            (0.00000026627, 5.54127301037, 131.4039498699),
            (0.00000029866, 1.65980844667, 447.7958195265),
            (0.00000029206, 1.14722640419, 462.0229135281),
            (0.00000025753, 4.99362028417, 137.0330241624),
            (0.00000025373, 5.73584678604, 380.12776796),
            (0.00000021672, 2.80556379586, 69.3649725959),
            (0.00000026605, 6.14640604128, 299.1263942692),
            (0.00000022995, 2.24925345862, 111.4301614968),
            (0.00000019246, 3.55645739672, 54.1746707478),
            (0.0000002178, 0.93285892393, 213.299095438),
            (0.00000019338, 1.86249384092, 108.4612160802),
            (0.00000016153, 3.10208165842, 14.977853527),
            (0.00000013126, 1.95385539499, 87.3117715395),
            (0.00000013907, 1.541490458, 340.7708920448),
            (0.00000013549, 4.3845512672, 5.9378908332),
            (0.00000013102, 5.88301410143, 6.2197751235),
            (0.0000001181, 0.32615567587, 35.4247226521),
            (0.0000001098, 1.69230280951, 45.5766510387),
            (0.00000012351, 0.32823896833, 51.2057253312),
            (0.00000010906, 5.9706844479, 265.9892934775),
            (0.00000011446, 3.37831545858, 72.3339180125),
            (0.00000012013, 3.60395709253, 269.9214467406),
            (0.00000011662, 1.74504271366, 79.2350166922),
            (0.00000013777, 2.69028726334, 225.8292684102),
            (0.00000012006, 5.34430562395, 152.5321425512),
            (0.00000010436, 4.16875643286, 24.3790223882),
            (0.00000010632, 3.06875158069, 284.1485407422),
            (0.00000010159, 3.51765739489, 529.6909650946),
            (0.0000001003, 4.6479020458, 77.2292791221),
        ),
        # L2
        (
            (0.00053033277, 0.0, 0.0),
            (0.00002357636, 2.26014661705, 74.7815985673),
            (0.00000769129, 4.52561041823, 11.0457002639),
            (0.00000551533, 3.25814281023, 63.7358983034),
            (0.00000541532, 2.27573907424, 3.9321532631),
            (0.00000529473, 4.92348433826, 1.4844727083),
            (0.00000257521, 3.69059216858, 3.1813937377),
            (0.00000238835, 5.85806638405, 149.5631971346),
            (0.00000181904, 6.21763603405, 70.8494453042),
            (0.00000049401, 6.03101301723, 56.6223513026),
            (0.00000053504, 1.44225240953, 76.2660712756),
            (0.00000038222, 1.78467827781, 52.6901980395),
            (0.00000044753, 3.90904910523, 2.4476805548),
            (0.0000004453, 0.81152639478, 85.8272988312),
            (0.00000037403, 4.46228598032, 2.9689454166),
            (0.00000033029, 0.86388149962, 9.5612275556),
            (0.00000024292, 2.10702559049, 18.1592472647),
            (0.00000029423, 5.09818697708, 73.297125859),
            (0.00000022135, 4.81730808582, 78.7137518304),
            (0.00000022491, 5.99320728691, 138.5174968707),
            (0.00000017226, 2.53537183199, 145.6310438715),
            (0.00000021392, 2.39880709309, 77.962992305),
            (0.00000020578, 2.16918786539, 224.3447957019),
            (0.00000016777, 3.46631344086, 12.5301729722),
            (0.00000012012, 0.01941361902, 22.0914005278),
            (0.00000010466, 4.45556032593, 62.2514255951),
            (0.0000001101, 0.0849627437, 127.4717966068),
            (0.00000010476, 5.16453084068, 71.6002048296),
        ),
        # L3
        (
            (0.00000120936, 0.02418789918, 74.7815985673),
            (0.00000068064, 4.12084267733, 3.9321532631),
            (0.00000052828, 2.3896406126, 11.0457002639),
            (0.00000043754, 2.95965039734, 1.4844727083),
            (0.000000453, 2.0442379841, 3.1813937377),
            (0.00000045806, 0.0, 0.0),
            (0.00000024969, 4.88741307918, 63.7358983034),
            (0.00000021061, 4.54511486862, 70.8494453042),
            (0.00000019897, 2.31320314136, 149.5631971346),
        ),
        # L4
        (
            (0.00000113855, 3.14159265359, 0.0),
        ),
    ),
    'B': (
        # B0
        (
            (0.01346277639, 2.61877810545, 74.7815985673),
            (0.00062341405, 5.08111175856, 149.5631971346),
            (0.00061601203, 3.14159265359, 0.0),
            (0.00009963744, 1.61603876357, 76.2660712756),
            (0.00009926151, 0.57630387917, 73.297125859),
            (0.00003259455, 1.2611938596, 224.3447957019),
            (0.00002972318, 2.24367035538, 1.4844727083),
            (0.00002010257, 6.05550401088, 148.0787244263),
            (0.00001522172, 0.27960386377, 63.7358983034),
            (0.00000924055, 4.03822927853, 151.0476698429),
            (0.00000760624, 6.14000431923, 71.8126531507),
            (0.00000420265, 5.21279984788, 11.0457002639),
            (0.00000430668, 3.55445034854, 213.299095438),
            (0.00000436843, 3.38082524317, 529.6909650946),
            (0.00000522309, 3.3208519477, 138.5174968707),
            (0.00000434625, 0.34065281858, 77.7505439839),
            (0.0000046263, 0.74256727574, 85.8272988312),
            (0.00000232649, 2.25716421383, 222.8603229936),
            (0.00000215838, 1.5912170494, 38.1330356378),
            (0.00000244698, 0.78795150326, 2.9689454166),
            (0.00000179935, 3.72487952673, 299.1263942692),
            (0.00000174895, 1.23550262213, 146.594251718),
            (0.00000173667, 1.93654269131, 380.12776796),
            (0.00000160368, 5.33635436463, 111.4301614968),
            (0.00000144064, 5.96239326415, 35.1640902212),
            (0.00000102049, 2.61876256513, 78.7137518304),
            (0.00000116363, 5.73877190007, 70.8494453042),
            (0.00000106441, 0.94103112994, 70.3281804424),
            (0.00000086163, 0.70262506622, 39.6175083461),
            (0.00000072617, 0.20564696113, 225.8292684102),
            (0.00000071172, 0.83343269975, 109.9456887885),
            (0.00000057502, 2.67039425415, 108.4612160802),
            (0.00000054255, 3.35166579613, 184.7272873558),
            (0.0000004447, 2.74408231138, 152.5321425512),
            (0.00000038591, 5.17394663303, 202.2533951741),
            (0.00000039157, 2.17108251341, 351.8165923087),
            (0.00000041346, 3.22134319551, 160.6088973985),
            (0.0000003514, 4.00111634363, 112.9146342051),
            (0.00000033073, 3.61378095742, 221.3758502853),
            (0.00000031315, 2.71969470781, 145.1097790097),
            (0.00000037336, 4.02053241202, 52.6901980395),
            (0.00000032028, 1.29160071142, 145.6310438715),
            (0.00000027574, 3.7006426696, 36.6485629295),
            (0.00000024277, 2.84989187496, 127.4717966068),
            (0.00000024635, 1.11645461259, 3.9321532631),
            (0.00000024315, 5.48987913644, 79.2350166922),
            (0.00000021418, 0.63722900407, 277.0349937414),
            (0.00000019826, 2.5933418223, 84.3428261229),
            (0.00000022373, 5.73687615457, 4.4534181249),
            (0.00000019137, 1.30214105578, 62.2514255951),
            (0.00000019789, 4.72260849557, 297.6419215609),
            (0.00000020299, 1.06070151806, 454.9093665273),
            (0.00000019768, 5.77906142568, 305.3461693927),
            (0.00000021348, 1.01350946382, 33.6796175129),
            (0.00000015142, 2.91786832554, 426.598190876),
            (0.00000016, 1.95535748902, 186.2117600641),
            (0.00000013819, 2.67163927171, 74.6697239827),
            (0.00000011463, 5.73391138419, 41.1019810544),
            (0.00000010741, 3.73401569675, 1059.3819301892),
            (0.0000001145, 3.98177764866, 106.9767433719),
            (0.0000001036, 4.75567608732, 183.2428146475),
            (0.00000010232, 6.18772866993, 373.9079928365),
            (0.00000013803, 5.70712120608, 74.8934731519),
            (0.00000010553, 3.78602881738, 490.3340891794),
            (0.00000011838, 5.96756415681, 87.3117715395),
            (0.0000001003, 1.74828757238, 22.0914005278),
            (0.00000010107, 0.92911975959, 65.2203710117),
            (0.00000012093, 2.53736362742, 9.5612275556),
            (0.00000011352, 2.12645777694, 68.8437077341),
        ),
        # B1
        (
            (0.00206366162, 4.12394311407, 74.7815985673),
            (0.0000856323, 0.33819986165, 149.5631971346),
            (0.00001725703, 2.12193159895, 73.297125859),
            (0.0000136886, 3.06861722047, 76.2660712756),
            (0.00001374449, 0.0, 0.0),
            (0.00000399847, 2.84767037795, 224.3447957019),
            (0.00000450639, 3.77656180977, 1.4844727083),
            (0.00000307214, 1.25456766737, 148.0787244263),
            (0.00000154336, 3.78575467747, 63.7358983034),
            (0.00000110888, 5.32888676461, 138.5174968707),
            (0.00000112432, 5.57299891505, 151.0476698429),
            (0.00000083493, 3.59152795558, 71.8126531507),
            (0.00000055573, 3.40135416354, 85.8272988312),
            (0.00000041377, 4.45476669141, 78.7137518304),
            (0.0000005369, 1.70455769943, 77.7505439839),
            (0.00000041912, 1.21476607434, 11.0457002639),
            (0.00000031959, 3.77446207748, 222.8603229936),
            (0.00000030297, 2.56371683644, 2.9689454166),
            (0.00000026977, 5.33695500294, 213.299095438),
            (0.00000026222, 0.41620628369, 380.12776796),
            (0.00000020094, 5.9308563351, 529.6909650946),
            (0.00000022992, 2.48887389394, 146.594251718),
            (0.0000001959, 5.37213500014, 299.1263942692),
            (0.00000020408, 3.70179681605, 70.8494453042),
            (0.00000019102, 1.09213276596, 111.4301614968),
            (0.00000019411, 3.83015453768, 38.1330356378),
            (0.00000010847, 2.66326308043, 3.9321532631),
            (0.00000010249, 2.3127880772, 109.9456887885),
        ),
        # B2
        (
            (0.00009211656, 5.80044305785, 74.7815985673),
            (0.00000556926, 0.0, 0.0),
            (0.00000286265, 2.17729776353, 149.5631971346),
            (0.00000094969, 3.84237569809, 73.297125859),
            (0.00000045419, 4.87822046064, 76.2660712756),
            (0.00000020107, 5.46264485369, 1.4844727083),
            (0.00000014793, 0.87983715652, 138.5174968707),
            (0.00000013963, 5.07234043994, 63.7358983034),
            (0.00000014261, 2.84517742687, 148.0787244263),
            (0.00000010122, 5.00290894862, 224.3447957019),
        ),
        # B3
        (
            (0.00000267832, 1.25097888291, 74.7815985673),
            (0.00000011048, 3.14159265359, 0.0),
        ),
    ),
    'R': (
        # R0
        (
            (19.21264847881, 0.0, 0.0),
            (0.88784984055, 5.60377526994, 74.7815985673),
            (0.03440835545, 0.32836098991, 73.297125859),
            (0.02055653495, 1.78295170028, 149.5631971346),
            (0.00649321851, 4.52247298119, 76.2660712756),
            (0.00602248144, 3.86003820462, 63.7358983034),
            (0.00496404171, 1.40139934716, 454.9093665273),
            (0.00338525522, 1.58002682946, 138.5174968707),
            (0.00243508222, 1.57086595074, 71.8126531507),
            (0.00190521915, 1.99809364502, 1.4844727083),
            (0.00161858251, 2.79137863469, 148.0787244263),
            (0.00143705902, 1.38368574483, 11.0457002639),
            (0.00093192359, 0.17437193645, 36.6485629295),
            (0.00071424265, 4.24509327405, 224.3447957019),
            (0.00089805842, 3.66105366329, 109.9456887885),
            (0.00039009624, 1.66971128869, 70.8494453042),
            (0.00046677322, 1.39976563936, 35.1640902212),
            (0.00039025681, 3.36234710692, 277.0349937414),
            (0.0003675516, 3.88648934736, 146.594251718),
            (0.00030348875, 0.70100446346, 151.0476698429),
            (0.00029156264, 3.18056174556, 77.7505439839),
            (0.00020471584, 1.555889615, 202.2533951741),
            (0.0002562036, 5.25656292802, 380.12776796),
            (0.00025785805, 3.78537741503, 85.8272988312),
            (0.00022637152, 0.72519137745, 529.6909650946),
            (0.00020473163, 2.79639811626, 70.3281804424),
            (0.00017900561, 0.55455488605, 2.9689454166),
            (0.00012328151, 5.96039150918, 127.4717966068),
            (0.00014701566, 4.90434406648, 108.4612160802),
            (0.00011494701, 0.43774027872, 65.2203710117),
            (0.00015502809, 5.35405037603, 38.1330356378),
            (0.00010792699, 1.42104858472, 213.299095438),
            (0.00011696085, 3.29825599114, 3.9321532631),
            (0.00011959355, 1.75044072173, 984.6003316219),
            (0.00012896507, 2.62154018241, 111.4301614968),
            (0.00011852996, 0.99342814582, 52.6901980395),
            (0.00009111446, 4.99638600045, 62.2514255951),
            (0.0000842055, 5.25350716616, 222.8603229936),
            (0.00007449125, 0.79491905956, 351.8165923087),
            (0.00008402147, 5.03877516489, 415.5524906121),
            (0.0000604637, 5.67960948357, 78.7137518304),
            (0.00005524133, 3.11499484161, 9.5612275556),
            (0.00007329454, 3.9727752784, 183.2428146475),
            (0.00005444878, 5.10575635361, 145.1097790097),
            (0.00005238103, 2.62960141797, 33.6796175129),
            (0.00004079167, 3.22064788674, 340.7708920448),
            (0.00003801606, 6.10985558505, 184.7272873558),
            (0.00003919476, 4.25015288873, 39.6175083461),
            (0.00002940492, 2.14637460319, 137.0330241624),
            (0.00003781219, 3.45840272873, 456.3938392356),
            (0.00002942239, 0.42393808854, 299.1263942692),
            (0.00003686787, 2.48718116535, 453.424893819),
            (0.00003101743, 4.14031063896, 219.891377577),
            (0.00002962641, 0.82977991995, 56.6223513026),
            (0.00002937799, 3.6765745093, 140.001969579),
            (0.00002865128, 0.30996903761, 12.5301729722),
            (0.00002538032, 4.85457831993, 131.4039498699),
            (0.0000196251, 5.24342224065, 84.3428261229),
            (0.0000236355, 0.44253328372, 554.0699874828),
            (0.00001979394, 6.12836181686, 106.9767433719),
            (0.00002182572, 2.94040431638, 305.3461693927),
            (0.00001962974, 0.0411473912, 221.3758502853),
            (0.0000182956, 4.01105771632, 68.8437077341),
            (0.0000164292, 0.35564102554, 67.6680515665),
            (0.0000158485, 3.16267171762, 225.8292684102),
            (0.00001848655, 2.91111759376, 909.8187330546),
            (0.0000163243, 4.23061792837, 22.0914005278),
            (0.0000140139, 1.39084023521, 265.9892934775),
            (0.00001403717, 5.63563637532, 4.4534181249),
            (0.00001655866, 1.96431297431, 79.2350166922),
            (0.00001248978, 5.44027380866, 54.1746707478),
            (0.00001563447, 1.47917835549, 112.9146342051),
            (0.00001248054, 4.88984353601, 479.2883889155),
            (0.00001197439, 2.52185744943, 145.6310438715),
            (0.00001506952, 5.24186185583, 181.7583419392),
            (0.00001481746, 5.66203046912, 152.5321425512),
            (0.00001438838, 1.53046287618, 447.7958195265),
            (0.00001408514, 4.41921749601, 462.0229135281),
            (0.00001477112, 4.32214690647, 256.5399405065),
            (0.00001228314, 5.9770333104, 59.8037450403),
            (0.00001249958, 6.24484546141, 160.6088973985),
            (0.00000906468, 5.62025869483, 74.6697239827),
            (0.00001090681, 4.15393813845, 77.962992305),
            (0.00000844931, 0.12943398585, 82.8583534146),
            (0.00000900363, 2.37315925843, 74.8934731519),
            (0.00001071957, 1.74286714339, 528.2064923863),
            (0.00000689708, 3.08097059985, 69.3649725959),
            (0.00000593798, 4.50074517056, 8.0767548473),
            (0.00000718559, 4.00047509264, 128.9562693151),
            (0.00000699574, 0.03987168068, 143.6253063014),
            (0.00000575656, 5.89552672641, 66.70484372),
            (0.00000759004, 2.13700057433, 692.5874843535),
            (0.00000710449, 5.41605755095, 218.4069048687),
            (0.00000548672, 5.6281149697, 3.1813937377),
            (0.00000651632, 4.42340061551, 18.1592472647),
            (0.00000539825, 6.20788667166, 71.6002048296),
            (0.00000544539, 5.69375108253, 203.7378678824),
            (0.00000710276, 4.21967260022, 381.6122406683),
            (0.00000593819, 3.83805798523, 32.1951448046),
            (0.00000710134, 4.48972171999, 293.188503436),
            (0.00000705482, 0.45521177725, 835.0371344873),
            (0.00000588, 5.08252923316, 186.2117600641),
            (0.00000598231, 0.35815291076, 269.9214467406),
            (0.00000641914, 2.71127457036, 87.3117715395),
            (0.00000495621, 2.65094755989, 200.7689224658),
            (0.00000630252, 4.46146214548, 275.5505210331),
            (0.00000575195, 5.57862480486, 2.4476805548),
            (0.0000056987, 1.6393093274, 77.2292791221),
            (0.00000556672, 1.07231961344, 1059.3819301892),
            (0.00000449439, 0.27981733949, 617.8058857862),
            (0.00000463608, 1.43448297993, 297.6419215609),
            (0.00000436547, 0.52802035072, 209.3669421749),
            (0.00000463938, 2.35443114417, 211.8146227297),
            (0.00000435943, 2.10077211065, 1514.2912967165),
            (0.00000515534, 3.23274579379, 284.1485407422),
            (0.00000454879, 4.08364210459, 99.1606209555),
            (0.0000047743, 2.89397217998, 39.3568759152),
            (0.00000542331, 5.39481705077, 278.5194664497),
            (0.00000410087, 3.04968860441, 404.5067903482),
            (0.00000367848, 0.71159607058, 125.9873238985),
            (0.00000503096, 5.83931251717, 191.2076949102),
            (0.00000487532, 0.06402454583, 60.7669528868),
            (0.00000455043, 2.59321186669, 490.3340891794),
            (0.00000436291, 2.08183813746, 51.2057253312),
            (0.00000435803, 2.79445203085, 75.7448064138),
            (0.00000323546, 4.82899980859, 195.1398481733),
            (0.00000359363, 0.00868012078, 35.4247226521),
            (0.00000429314, 3.08031550488, 41.1019810544),
            (0.00000320021, 5.48625497747, 14.977853527),
            (0.00000414331, 0.09012800478, 258.0244132148),
            (0.00000379715, 0.05832815311, 378.6432952517),
            (0.00000420062, 2.25393983318, 81.0013736908),
            (0.00000357721, 4.71414305625, 173.9422195228),
            (0.00000358922, 0.35213227553, 426.598190876),
            (0.0000040541, 6.12263257999, 24.3790223882),
            (0.00000365158, 5.59483211224, 255.0554677982),
            (0.00000308102, 3.92355394354, 116.4260963429),
            (0.0000032566, 4.71996698332, 134.5853436076),
            (0.00000292781, 3.9952119483, 72.3339180125),
            (0.00000386543, 0.68619006966, 230.5645708254),
            (0.00000305686, 3.76108783519, 344.7030453079),
            (0.00000286972, 1.8499033531, 153.4953503977),
            (0.0000035364, 4.65717995107, 329.8370663655),
            (0.00000302051, 0.13190003806, 565.1156877467),
            (0.00000241128, 1.60454142389, 81.3738807063),
            (0.00000249829, 4.24205256241, 75.3028634291),
            (0.00000245063, 5.94905404273, 20.6069278195),
            (0.00000248277, 1.06282887181, 105.4922706636),
            (0.00000305353, 2.55534744586, 6208.2942514241),
            (0.00000296328, 4.21100245276, 1364.7280995819),
            (0.00000219938, 2.96119055727, 120.358249606),
            (0.00000233564, 2.97074409938, 46.2097904851),
            (0.00000262422, 3.83652250971, 831.1049812242),
            (0.00000233546, 4.4811700614, 628.8515860501),
            (0.00000187432, 3.03529190348, 135.5485514541),
            (0.00000216776, 3.42907414802, 241.6102710893),
            (0.0000025576, 1.1670789346, 177.8743727859),
            (0.00000220458, 0.1963349229, 180.2738692309),
            (0.00000224519, 0.40677777819, 114.3991069134),
            (0.00000205398, 2.30380942634, 259.5088859231),
            (0.00000211106, 4.93079982424, 103.0927742186),
            (0.00000175758, 5.50822822216, 7.1135470008),
            (0.00000188512, 2.23588941288, 5.4166259714),
            (0.00000171718, 5.21730232334, 41.6444977756),
            (0.00000176136, 1.95958319897, 756.3233826569),
            (0.00000170447, 4.94978757413, 206.1855484372),
            (0.00000169454, 4.04319823722, 55.6591434561),
            (0.00000219015, 0.24790282027, 294.6729761443),
            (0.00000187768, 2.04538775456, 408.4389436113),
            (0.00000182258, 0.70728384467, 391.1734682239),
            (0.00000192095, 5.76718231319, 291.7040307277),
            (0.00000153684, 4.70659406659, 543.0242872189),
            (0.00000170043, 4.50995820508, 288.0806940053),
            (0.00000164097, 5.22527540372, 67.3592350258),
            (0.00000194341, 6.1169036471, 414.0680179038),
            (0.00000168027, 5.25810639105, 518.6452648307),
            (0.00000156641, 0.66304836778, 220.4126424388),
            (0.0000018233, 0.78383856974, 417.0369633204),
            (0.00000167462, 4.92241597775, 422.6660376129),
            (0.0000017077, 2.30927162659, 98.8999885246),
            (0.00000161678, 3.27259601116, 443.8636662634),
            (0.00000132763, 2.88875442023, 373.9079928365),
            (0.0000016114, 3.82341391177, 451.9404211107),
            (0.00000179292, 4.82405681293, 366.485629295),
            (0.00000178153, 3.98026039043, 10138.5039476437),
            (0.00000141929, 1.26972581554, 159.1244246902),
            (0.0000015375, 4.27847681414, 45.5766510387),
            (0.00000161513, 4.99545008738, 73.8183907208),
            (0.00000146315, 2.65664902119, 465.9550667912),
            (0.00000124875, 4.30470898895, 339.2864193365),
            (0.0000015462, 4.3204622812, 760.25553592),
            (0.00000142894, 2.07773752143, 457.8783119439),
            (0.00000152408, 4.64742446768, 155.7829722581),
            (0.00000116389, 4.43513730944, 5.9378908332),
            (0.00000113444, 4.65351596266, 80.1982245387),
            (0.00000107611, 3.77290419929, 142.4496501338),
            (0.0000013374, 5.30894739047, 14.0146456805),
            (0.00000116104, 2.5118272567, 296.1574488526),
            (0.00000129106, 0.36277717661, 96.8729990951),
            (0.00000122766, 2.38341351026, 141.4864422873),
            (0.00000101368, 1.05739625315, 92.3077063856),
            (0.00000114669, 6.24863527978, 767.3690829208),
            (0.00000113283, 0.83051319425, 100.3844612329),
            (0.00000107199, 2.39365512354, 347.8844390456),
            (0.00000095443, 0.80094579583, 342.2553647531),
            (0.00000110789, 0.38651051525, 216.9224321604),
            (0.00000126978, 0.4235935825, 331.3215390738),
            (0.00000112635, 0.08107814739, 558.0021407459),
            (0.00000103166, 0.69792283389, 358.9301393095),
            (0.00000111474, 0.75023459027, 80.7194894005),
            (0.00000090902, 5.16530481614, 144.1465711632),
            (0.00000090677, 0.22036476597, 333.657345044),
            (0.00000098568, 4.33164222339, 74.5209661364),
            (0.00000089306, 2.18851161761, 74.8297826771),
            (0.00000117216, 3.94965784596, 74.2603337055),
            (0.00000089088, 5.87783179087, 74.7334144575),
            (0.00000097316, 0.6942969502, 977.4867846211),
            (0.00000116587, 1.83677031994, 1289.9465010146),
            (0.00000085449, 5.80255966149, 6.592282139),
            (0.00000086823, 5.61973473261, 300.6108669775),
            (0.00000105226, 5.94513614941, 328.3525936572),
            (0.00000112117, 1.21168089807, 329.7251917809),
            (0.00000082982, 2.20797412496, 74.9416572617),
            (0.00000094345, 4.53937998713, 28.5718080822),
            (0.00000106847, 1.82071328579, 306.830642101),
            (0.00000103572, 2.99368274596, 6.2197751235),
            (0.00000106357, 0.8158387475, 1087.6931058405),
            (0.00000077728, 2.73390123734, 110.2063212194),
            (0.00000098405, 3.73478182667, 75.0422309982),
            (0.00000086231, 2.83316881064, 983.1158589136),
            (0.00000089023, 4.7375445896, 604.4725636619),
            (0.00000083013, 1.88273535999, 387.2413149608),
            (0.00000090227, 3.80367274711, 986.0848043302),
            (0.00000084598, 1.25774132938, 142.1408335931),
            (0.0000007469, 1.35097482767, 350.3321196004),
            (0.0000009577, 5.54845504768, 969.6224780949),
            (0.00000090277, 0.36773710508, 0.9632078465),
            (0.00000082748, 5.85590525764, 74.6215398729),
            (0.00000075828, 2.78019216029, 88.1149206916),
            (0.0000008385, 1.84386358668, 227.3137411185),
            (0.00000070705, 4.65567024014, 44.7253177768),
            (0.00000071322, 3.64963906751, 894.8408795276),
            (0.00000094141, 4.98819201726, 403.1341922245),
            (0.00000088966, 4.43895583278, 154.0166152595),
            (0.00000079436, 5.66662613679, 267.4737661858),
            (0.00000075615, 5.40971072536, 50.4025761791),
            (0.00000068583, 4.76679841388, 991.7138786227),
            (0.00000065256, 0.69286370395, 152.7445908723),
            (0.00000063031, 2.89946567712, 79.889407998),
            (0.00000063878, 0.09820555288, 681.5417840896),
            (0.00000080101, 2.97520561915, 526.722019678),
            (0.00000069693, 3.95281159807, 187.6962327724),
            (0.00000059492, 3.59642351692, 58.1068240109),
            (0.00000059273, 0.50930692071, 28.3111756513),
            (0.0000006859, 2.4188031153, 235.3904959658),
            (0.00000066007, 5.04558399435, 30.7106720963),
            (0.00000070223, 3.73647415486, 546.956440482),
            (0.00000066836, 0.85506033017, 522.5774180938),
            (0.00000063027, 0.29269109052, 119.5069163441),
            (0.00000062023, 2.31557510311, 74.0308390419),
            (0.00000071379, 3.16967571102, 23.5758732361),
            (0.00000074827, 5.36812537961, 373.0142209592),
            (0.00000064204, 2.3681714946, 157.6399519819),
            (0.00000070712, 0.55830476304, 92.940845832),
            (0.00000055762, 5.27011035858, 874.3940104025),
            (0.00000075638, 4.66344127677, 101.8689339412),
            (0.00000073727, 6.20581665991, 312.4597163935),
            (0.0000007294, 0.58406607757, 367.9701020033),
            (0.0000005323, 2.24728742995, 17.5261078183),
            (0.00000063139, 4.59563922296, 67.8804998876),
            (0.0000006055, 0.57591315857, 253.5709950899),
            (0.00000052946, 2.45947017614, 264.5048207692),
            (0.00000070236, 1.51860943454, 552.5855147745),
            (0.00000068624, 2.44507780453, 555.5544601911),
            (0.00000062796, 0.33786296181, 561.1835344836),
            (0.00000049009, 1.09233728279, 19.1224551112),
            (0.00000064636, 5.274699709, 68.1893164283),
            (0.00000062957, 5.35891188483, 92.0470739547),
            (0.00000047664, 3.90924952181, 192.6921676185),
            (0.00000065279, 4.23629510074, 771.3012361839),
            (0.0000006519, 3.73942854797, 536.8045120954),
            (0.00000059452, 6.10554259948, 365.0011565867),
            (0.00000052153, 1.71734604937, 905.8865797915),
            (0.00000046035, 3.87093684776, 210.3301500214),
            (0.00000046429, 5.97423131576, 477.8039162072),
            (0.00000062115, 2.67544358037, 130.4407420234),
            (0.00000046038, 3.89378239085, 48.7580447764),
            (0.00000042663, 3.81519760715, 61.2882177486),
            (0.00000053909, 2.86457147106, 353.301065017),
            (0.00000046936, 1.00011046774, 166.828672522),
            (0.00000042217, 2.61748790314, 90.8232336773),
            (0.00000043324, 4.15777895713, 173.6815870919),
            (0.00000041296, 1.79930408254, 149.45132255),
            (0.0000004496, 1.76623306927, 0.5212648618),
            (0.00000051904, 2.97773319756, 383.0967133766),
            (0.00000042931, 1.57416456203, 120.9913890524),
            (0.00000049611, 4.0342792047, 303.8616966844),
            (0.00000045263, 3.58382163089, 97.4155158163),
            (0.00000038695, 2.39404211169, 31.492569389),
            (0.00000038072, 5.7947367035, 75.5323580927),
            (0.00000050126, 4.76412907201, 911.3032057629),
            (0.00000050884, 5.15513957132, 439.782755154),
            (0.00000043148, 0.84999004804, 58.319272332),
            (0.00000042732, 5.17318058934, 162.0933701068),
            (0.00000050298, 5.81603435915, 66.9172920411),
            (0.00000035639, 1.87447823723, 472.1748419147),
            (0.00000049963, 1.8894349079, 42.5864537627),
            (0.00000039974, 1.74262050679, 89.7594520943),
            (0.00000045252, 1.92511912328, 55.1378785943),
            (0.00000044896, 1.4835590189, 450.9772132642),
            (0.00000034297, 5.20257496546, 316.3918696566),
            (0.00000046355, 0.33942039181, 273.1028404783),
            (0.00000037152, 2.03757941865, 117.9105690512),
            (0.00000046106, 5.62315633955, 1819.6374661092),
            (0.00000039368, 4.19402806344, 486.4019359163),
            (0.00000041039, 4.82994471947, 149.6750717192),
            (0.00000044959, 0.72694662195, 3265.8308281325),
            (0.00000043617, 0.75332422672, 404.6186649328),
            (0.00000031823, 3.84768075667, 20.4468691251),
            (0.00000044196, 4.36769721266, 418.2608035978),
            (0.000000379, 3.02928044053, 167.0893049529),
            (0.00000043684, 1.57328182739, 491.5579294568),
            (0.00000034004, 1.26257052908, 260.9933586314),
            (0.00000031276, 4.16123711648, 13.3333221243),
            (0.00000039984, 2.8662612562, 468.2426886516),
            (0.0000003649, 2.58804294589, 68.5618234438),
            (0.00000032364, 3.11577354875, 103.3534066495),
            (0.00000033857, 0.15592410716, 24.1183899573),
            (0.00000035933, 1.36784550071, 59.2824801785),
            (0.00000033633, 0.755011774, 290.2195580194),
            (0.00000029751, 5.33178627038, 1033.3583763983),
            (0.00000032036, 4.67549858, 205.2223405907),
            (0.00000030991, 4.62823866461, 258.8757464767),
            (0.00000035268, 1.00718464327, 1108.1399749656),
            (0.00000033366, 3.40738625377, 43.1289704839),
            (0.00000032638, 5.25485850258, 114.1384744825),
            (0.00000029825, 5.64157476876, 254.9435932136),
            (0.00000031613, 3.7823139311, 152.0108776894),
            (0.0000003098, 2.26660677937, 104.0077979553),
            (0.00000034591, 5.17326577255, 25.6028626656),
            (0.00000028398, 1.76872790446, 820.0592809603),
            (0.00000027991, 3.92486885309, 199.2844497575),
            (0.00000028986, 2.58171811759, 76.4785195967),
            (0.00000033772, 5.79359878723, 274.0660483248),
            (0.00000029401, 5.93638676504, 280.9671470045),
            (0.00000031094, 1.39352495971, 178.7893965226),
            (0.00000030118, 0.44367887423, 27.0873353739),
            (0.0000003382, 6.26168443513, 401.6497195162),
            (0.00000027513, 2.15194454461, 480.7728616238),
            (0.0000002688, 2.5130027278, 123.5396433437),
            (0.00000026139, 0.21985367371, 286.596221297),
            (0.00000026455, 3.88229792258, 372.4235201282),
            (0.00000033974, 1.44637843871, 88.7962442478),
            (0.00000030107, 0.82723915882, 100.6450936638),
            (0.00000027715, 4.64827434185, 198.321241911),
            (0.00000033687, 1.14348201049, 82.4858463991),
            (0.00000026493, 1.97889544238, 95.3885263868),
            (0.00000024355, 2.3783917615, 146.3818033969),
            (0.0000002659, 0.39881920389, 106.0135355254),
            (0.00000027006, 2.10206230691, 1057.8974574809),
            (0.00000023976, 6.21233637686, 16.6747745564),
            (0.0000003097, 5.34005431547, 476.4313180835),
            (0.00000024073, 3.42953641968, 1044.4040766622),
            (0.00000027023, 0.71284764471, 248.7238180901),
            (0.00000029098, 3.99184722502, 908.3342603463),
            (0.00000022862, 2.26978781393, 175.1660598002),
            (0.00000024026, 0.36584131268, 73.1852512744),
            (0.00000028024, 3.46485782266, 1439.5096981492),
            (0.00000022034, 0.051638073, 33.1371007917),
            (0.00000022185, 5.32252126255, 483.2205421786),
            (0.00000021027, 0.37224660652, 214.7835681463),
            (0.00000020548, 1.80004483299, 118.0224436358),
            (0.00000027835, 4.1241255353, 694.0719570618),
            (0.000000255, 5.49632191634, 115.8835796217),
            (0.00000021377, 3.89179204956, 66.1835788582),
            (0.00000027201, 5.761487979, 1215.1649024473),
            (0.00000024984, 0.65339418015, 132.8884225782),
            (0.00000023976, 4.56161326826, 458.8415197904),
            (0.00000021116, 1.1361070625, 60.5545045657),
            (0.00000026263, 2.77532723118, 490.0734567485),
            (0.00000026369, 3.371200393, 49.7212526229),
            (0.0000002287, 4.5313563762, 78.4049352897),
            (0.00000026872, 3.26037129303, 691.1030116452),
            (0.00000025004, 3.65018677651, 73.4090004436),
            (0.00000020874, 3.92589972978, 134.0640787458),
            (0.00000020915, 5.53955400138, 129.9194771616),
            (0.00000023067, 2.56806856688, 332.8060117821),
            (0.0000002263, 5.02721554401, 150.5264049811),
            (0.00000019123, 1.92386327535, 124.5028511902),
            (0.00000020678, 0.98302410602, 29.2049475286),
            (0.00000018755, 1.07911898422, 70.1157321213),
            (0.00000019458, 1.33847349577, 616.3214130779),
            (0.00000023071, 3.93152899657, 43.2890291783),
            (0.00000023313, 0.61185525008, 189.7232222019),
            (0.0000001966, 1.40884902649, 1589.0728952838),
            (0.0000002499, 0.91842956919, 441.2672278623),
            (0.00000023555, 0.02127675886, 593.426863398),
            (0.00000018288, 4.55111843462, 165.6048322446),
            (0.0000002098, 0.88504201898, 326.8681209489),
            (0.0000002494, 4.63470443286, 162.8965192589),
            (0.00000018941, 5.10763304564, 81.8951455681),
            (0.00000018911, 1.23351635328, 13.4933808187),
            (0.00000017358, 4.05768226252, 403.0223176399),
            (0.00000017362, 5.2860722764, 7.8643065262),
            (0.00000022513, 3.15059891398, 419.7452763061),
            (0.00000021237, 2.14856256664, 75.5847477194),
            (0.00000017845, 2.54349200329, 47.061123747),
            (0.00000016995, 2.48647736969, 2043.9822618111),
            (0.00000023676, 5.80355919955, 232.0490435337),
            (0.00000022639, 2.07623129509, 699.7010313543),
            (0.00000019261, 1.56494156016, 425.1137181677),
            (0.00000021067, 5.30844438236, 237.6781178262),
            (0.00000022733, 0.2830312644, 0.1118745846),
            (0.00000016372, 3.45984005656, 0.7507595254),
            (0.00000021213, 0.95828006612, 405.9912630565),
            (0.00000018033, 1.60723214246, 215.4379594521),
            (0.00000016267, 4.8900201636, 69.1525242748),
            (0.00000021738, 3.24738839789, 1744.8558675419),
            (0.00000016149, 0.35803995032, 77.0692204277),
            (0.0000002171, 0.88800040769, 344.9636777388),
            (0.00000017204, 6.04366142241, 32.2433289144),
            (0.00000017883, 4.01076173641, 280.003939158),
            (0.00000015918, 2.96623390816, 25.8634950965),
            (0.00000014769, 3.73887340623, 610.6923387854),
            (0.00000015033, 4.24825484707, 228.276948965),
            (0.00000015586, 5.0798708274, 114.9416236346),
            (0.00000015392, 0.22971106129, 17.2654753874),
            (0.00000015354, 0.25482391126, 661.0949149645),
            (0.00000014617, 1.13349626273, 823.9914342234),
            (0.00000016232, 3.4349974381, 147.1155165798),
            (0.00000014654, 1.68288566884, 207.8824694666),
            (0.00000017682, 5.94376629143, 624.919432787),
            (0.00000018837, 1.3833540807, 377.1588225434),
            (0.00000015425, 1.66489033237, 440.6822725257),
            (0.00000014764, 4.41710614445, 16.4623262353),
            (0.00000014402, 0.41359448817, 142.6620984549),
            (0.00000016992, 0.16042368544, 438.2982824457),
            (0.00000013268, 3.04634728126, 668.2084619653),
            (0.0000001646, 0.92068542861, 369.0820676961),
            (0.00000017239, 4.51659246818, 606.7601855223),
            (0.00000013238, 0.13650358961, 216.4804891757),
            (0.00000015832, 4.94315562971, 124.2904028691),
            (0.00000014374, 2.93700606008, 419.4846438752),
            (0.00000012927, 1.65950183061, 54.3347294422),
            (0.00000014224, 4.42286781619, 47.6942631934),
            (0.00000012753, 0.03020931725, 217.2312487011),
            (0.00000014792, 1.08447500622, 49.5088043018),
            (0.00000014031, 3.68785757687, 16.04163511),
            (0.00000013709, 4.78890618802, 72.7758609972),
            (0.00000013073, 1.54064778942, 218.9281697305),
            (0.00000017474, 5.05621281434, 564.8550553158),
            (0.00000012686, 3.4464088888, 958.576777831),
            (0.00000013035, 0.56445754615, 1171.875873269),
            (0.00000012458, 3.29187197133, 902.7051860538),
            (0.00000011893, 1.41294011193, 55.7710180407),
            (0.00000015018, 3.43209569509, 19.0105805266),
            (0.0000001647, 2.04067754807, 411.620337349),
            (0.00000015619, 1.53464600544, 833.552661779),
            (0.00000015678, 5.92839374034, 778.4147831847),
            (0.00000012039, 5.17748353434, 135.336103133),
            (0.00000015523, 3.54656631824, 113.8778420516),
            (0.00000014364, 4.19825110964, 89.338760969),
            (0.00000015424, 2.12697366269, 106.2741679563),
            (0.00000011957, 1.43314130608, 455.8725743738),
            (0.00000015938, 5.49575810978, 513.079881013),
            (0.00000013532, 4.11463529983, 95.2284676924),
            (0.00000015105, 1.86350524526, 7.7042478318),
            (0.00000015832, 3.42498484109, 79.5169009825),
            (0.00000011492, 4.6518745562, 149.6113812444),
            (0.00000011406, 1.31085455047, 63.6240237188),
            (0.00000014469, 3.35284802718, 19.643719973),
            (0.00000011953, 0.20979051344, 65.8747623175),
            (0.00000012039, 0.0142323841, 397.3932433474),
            (0.00000014157, 1.87440535404, 6283.0758499914),
            (0.00000011357, 0.19079103112, 5.6290742925),
            (0.00000014109, 0.09348109701, 6133.5126528568),
            (0.00000015322, 3.54468546172, 252.6559713532),
            (0.00000011681, 0.85100356112, 5.1078094307),
            (0.00000014134, 5.66340426198, 639.897286314),
            (0.00000011052, 0.47607339302, 150.0844619964),
            (0.00000011507, 5.19480309409, 1182.9215735329),
            (0.00000011492, 2.05801478181, 149.5150130248),
            (0.00000011571, 4.7821072497, 334.2904844904),
            (0.00000010671, 4.67373109923, 149.723255829),
            (0.00000011651, 3.13272450186, 93.9040536785),
            (0.00000014316, 0.08421279341, 240.3864308119),
            (0.00000010855, 4.52379396618, 453.9461586808),
            (0.000000119, 1.41784572428, 26.0235537909),
            (0.00000010851, 4.40625021974, 57.1436161644),
            (0.00000013385, 0.76174742916, 37.8724032069),
            (0.00000010664, 5.81644528276, 193.655375465),
            (0.000000107, 5.3459550607, 331.2096644892),
            (0.00000010465, 3.82648204886, 180.1619946463),
            (0.0000001335, 0.86920479636, 22.8945496799),
            (0.00000010324, 2.99969783109, 525.7588118315),
            (0.00000014293, 1.06904465002, 477.9157907918),
            (0.00000012341, 4.62813430535, 1894.4190646765),
            (0.00000012539, 3.70404881494, 67.0773507355),
            (0.00000011771, 1.07971321862, 363.5166838784),
            (0.00000011466, 0.9352838604, 121.8427223143),
            (0.00000012839, 0.31988787839, 474.9468453752),
            (0.00000010194, 6.23976471898, 84.1827674285),
            (0.000000123, 2.85238700423, 184.0941479094),
            (0.00000013861, 3.4836768877, 157.2674449664),
            (0.00000011395, 4.2553344068, 181.0557665236),
            (0.00000010146, 6.01371693363, 43.2408450685),
            (0.00000010798, 2.4636424394, 140.6563608848),
            (0.00000011012, 3.77284307154, 494.2662424425),
            (0.00000010226, 1.49169427598, 80.4106728598),
            (0.00000011981, 2.69741212203, 369.4545747116),
            (0.00000010658, 1.7870288097, 252.0865223816),
            (0.00000012506, 4.66852994807, 64.6991061499),
            (0.0000001164, 5.70405852396, 39.0962434843),
            (0.00000012305, 1.73322306013, 229.0800981171),
            (0.00000011004, 3.58723041577, 449.2802922348),
            (0.00000010581, 2.79550711884, 1246.6574718363),
            (0.00000010411, 2.8672714553, 189.1807054807),
            (0.00000012468, 0.76477162698, 122.4758617607),
            (0.00000010099, 6.06894682979, 156.1554792736),
            (0.00000012671, 6.19797171716, 149.8238295655),
            (0.00000010455, 1.23531019351, 148.5999892881),
            (0.00000010645, 5.50399216121, 460.5384408198),
            (0.00000012433, 5.298436616, 20.4950532349),
            (0.0000001211, 3.14577799081, 30.0562807905),
            (0.0000001038, 3.54528360301, 619.2903584945),
            (0.00000010139, 1.90528799801, 25.0603459444),
            (0.00000011206, 5.8782323899, 832.5894539325),
            (0.00000010994, 0.05721003392, 54.2865453324),
            (0.00000010843, 1.4281264822, 268.4369740323),
            (0.00000010874, 2.6136174199, 446.3113468182),
            (0.0000001077, 0.19304986906, 463.5073862364),
            (0.00000010216, 5.04428111805, 241.8709035202),
            (0.00000010621, 4.39013117792, 63.847772888),
            (0.00000010414, 4.96367476854, 97.6761482472),
            (0.00000010135, 1.90258069764, 91.4563731237),
            (0.00000010291, 3.58217488981, 842.1506814881),
            (0.00000010672, 2.28920805112, 194.2885149114),
            (0.00000010397, 4.90564475822, 829.6205085159),
            (0.00000010072, 1.18963356664, 621.7380390493),
            (0.00000010074, 2.59066128203, 711.4493070338),
        ),
        # R1
        (
            (0.0147989637, 3.67205705317, 74.7815985673),
            (0.00071212085, 6.22601006675, 63.7358983034),
            (0.00068626972, 6.13411265052, 149.5631971346),
            (0.00020857262, 5.24625494219, 11.0457002639),
            (0.00021468152, 2.6017670427, 76.2660712756),
            (0.00024059649, 3.14159265359, 0.0),
            (0.00011405346, 0.01848461561, 70.8494453042),
            (0.00007496775, 0.42360033283, 73.297125859),
            (0.000042438, 1.41692350371, 85.8272988312),
            (0.00003505936, 2.58354048851, 138.5174968707),
            (0.00003228835, 5.25499602896, 3.9321532631),
            (0.00003926694, 3.15513991323, 71.8126531507),
            (0.0000306001, 0.15321893225, 1.4844727083),
            (0.00003578446, 2.31160668309, 224.3447957019),
            (0.00002564251, 0.98076846352, 148.0787244263),
            (0.00002429445, 3.99440122468, 52.6901980395),
            (0.00001644719, 2.65349313124, 127.4717966068),
            (0.00001583766, 1.43045619196, 78.7137518304),
            (0.00001413112, 4.57461892062, 202.2533951741),
            (0.00001489525, 2.67559167316, 56.6223513026),
            (0.00001403237, 1.36985349744, 77.7505439839),
            (0.0000122822, 1.04703640149, 62.2514255951),
            (0.00001508028, 5.05996325425, 151.0476698429),
            (0.00000992085, 2.17168865909, 65.2203710117),
            (0.00001032731, 0.26459059027, 131.4039498699),
            (0.00000861867, 5.05530802218, 351.8165923087),
            (0.00000744445, 3.07640148939, 35.1640902212),
            (0.00000604362, 0.90717667985, 984.6003316219),
            (0.00000646851, 4.4729042291, 70.3281804424),
            (0.0000057471, 3.23070708457, 447.7958195265),
            (0.0000068747, 2.49912565674, 77.962992305),
            (0.00000623602, 0.8625307382, 9.5612275556),
            (0.00000527794, 5.15136007084, 2.9689454166),
            (0.00000561839, 2.7177815898, 462.0229135281),
            (0.00000530364, 5.91655309045, 213.299095438),
            (0.0000046008, 4.22302465979, 12.5301729722),
            (0.0000049428, 0.46291078127, 145.6310438715),
            (0.00000487336, 0.70614146398, 380.12776796),
            (0.00000380908, 3.85089591694, 3.1813937377),
            (0.00000444352, 2.15558291251, 67.6680515665),
            (0.000003388, 2.53820897704, 18.1592472647),
            (0.00000372947, 5.05141251694, 529.6909650946),
            (0.00000348345, 1.74874852104, 71.6002048296),
            (0.00000405881, 1.229617276, 22.0914005278),
            (0.00000268913, 6.24069521597, 340.7708920448),
            (0.00000255585, 2.95695013627, 84.3428261229),
            (0.00000259465, 3.92053708924, 59.8037450403),
            (0.00000224731, 3.90961468562, 160.6088973985),
            (0.0000022171, 3.64727173951, 137.0330241624),
            (0.00000254591, 3.50411592815, 38.1330356378),
            (0.0000023829, 2.04879982674, 269.9214467406),
            (0.00000272355, 3.38363105223, 222.8603229936),
            (0.00000200648, 1.24861003313, 69.3649725959),
            (0.00000234153, 0.27825220612, 108.4612160802),
            (0.00000188515, 4.41307507326, 265.9892934775),
            (0.00000211691, 0.68027381802, 111.4301614968),
            (0.00000205946, 1.53379817229, 284.1485407422),
            (0.00000196179, 4.77152996605, 299.1263942692),
            (0.00000153102, 5.21761881347, 209.3669421749),
            (0.00000162563, 4.3405435361, 33.6796175129),
            (0.00000150563, 1.98966326297, 54.1746707478),
            (0.00000137012, 0.40323866041, 195.1398481733),
            (0.00000117171, 0.39649791652, 87.3117715395),
            (0.00000127913, 2.40333045173, 39.6175083461),
            (0.00000104218, 2.92152185788, 134.5853436076),
            (0.00000103862, 1.81622936156, 72.3339180125),
            (0.00000105741, 0.17067407327, 79.2350166922),
            (0.00000106419, 0.69799543514, 2.4476805548),
            (0.00000095326, 4.02880266738, 82.8583534146),
            (0.00000104772, 4.43616414428, 305.3461693927),
            (0.00000093825, 5.01823592717, 51.2057253312),
            (0.00000103739, 2.57553519741, 191.2076949102),
            (0.00000106679, 1.22996874093, 225.8292684102),
            (0.00000093452, 3.09274255916, 77.2292791221),
            (0.00000097398, 3.81380841075, 152.5321425512),
            (0.00000084583, 5.72473747348, 68.8437077341),
            (0.00000077395, 0.08281157747, 45.5766510387),
            (0.00000076207, 4.20384370842, 73.8183907208),
            (0.00000086249, 0.53131085736, 145.1097790097),
            (0.00000075795, 3.78559826812, 75.7448064138),
            (0.00000077592, 1.63628139623, 479.2883889155),
            (0.00000084612, 0.6166245601, 116.4260963429),
            (0.00000100209, 4.94084867643, 120.358249606),
            (0.00000072142, 4.30505812564, 565.1156877467),
            (0.00000070733, 2.38450718488, 60.7669528868),
            (0.00000071585, 3.93906647867, 153.4953503977),
            (0.00000084566, 5.56037336584, 344.7030453079),
            (0.00000063556, 1.93742986679, 41.6444977756),
            (0.00000071619, 3.71213491656, 408.4389436113),
            (0.00000061594, 3.90006698249, 4.4534181249),
            (0.00000064973, 1.55845503407, 106.9767433719),
            (0.00000059913, 0.60110866128, 74.8934731519),
            (0.00000062, 4.39369268007, 453.424893819),
            (0.00000063361, 4.19159979468, 184.7272873558),
            (0.00000062301, 3.23773103318, 422.6660376129),
            (0.00000054427, 3.72545550857, 7.1135470008),
            (0.00000052474, 6.08562717749, 404.5067903482),
            (0.00000059073, 1.55568469603, 456.3938392356),
            (0.00000052597, 3.5049223397, 125.9873238985),
            (0.00000052835, 5.20100035142, 358.9301393095),
            (0.00000058123, 5.33480562448, 220.4126424388),
            (0.00000052909, 4.44819701196, 426.598190876),
            (0.00000050934, 0.526385342, 490.3340891794),
            (0.00000054968, 1.60146090981, 14.977853527),
            (0.00000049491, 4.25534603275, 5.4166259714),
            (0.00000051303, 0.36772379136, 206.1855484372),
            (0.00000051821, 1.75832999538, 8.0767548473),
            (0.00000056964, 0.84114552694, 146.594251718),
            (0.00000049109, 0.94061875871, 99.1606209555),
            (0.00000046361, 5.35115472594, 152.7445908723),
            (0.00000048023, 1.97249712347, 288.0806940053),
            (0.00000043772, 3.03713403879, 20.6069278195),
            (0.00000049493, 5.84619560979, 112.9146342051),
            (0.00000041987, 0.04620500196, 128.9562693151),
            (0.00000048628, 3.62817742782, 81.0013736908),
            (0.00000041472, 2.33730376429, 277.0349937414),
            (0.00000039983, 5.09525356576, 35.4247226521),
            (0.00000041948, 2.51050760642, 24.3790223882),
            (0.00000038325, 3.61946898382, 173.9422195228),
            (0.00000038385, 2.0600322013, 333.657345044),
            (0.00000042597, 1.260887373, 1514.2912967165),
            (0.00000038855, 0.74239364306, 347.8844390456),
            (0.00000038535, 4.95064283065, 92.940845832),
            (0.00000033234, 1.38358507432, 74.6697239827),
            (0.00000033788, 3.68407945156, 66.9172920411),
            (0.00000038953, 5.49236040328, 200.7689224658),
            (0.0000003185, 0.53990592534, 203.7378678824),
            (0.0000003332, 6.26012644668, 1059.3819301892),
            (0.00000030806, 2.53797566903, 977.4867846211),
            (0.00000029198, 5.43116906, 58.1068240109),
            (0.00000030059, 0.19481555617, 387.2413149608),
            (0.00000028997, 3.10546504714, 991.7138786227),
            (0.0000003564, 3.72863820177, 96.8729990951),
            (0.00000027607, 0.37142052647, 80.1982245387),
            (0.00000032492, 4.38403518987, 221.3758502853),
            (0.00000027029, 1.35552416596, 0.9632078465),
            (0.00000031276, 0.79566430555, 373.0142209592),
            (0.00000031122, 2.05381353845, 230.5645708254),
            (0.00000025883, 3.46808071409, 144.1465711632),
            (0.00000030201, 0.71392007232, 109.9456887885),
            (0.00000024688, 3.04162764358, 14.0146456805),
            (0.00000027882, 4.76559523368, 415.5524906121),
            (0.0000002511, 5.12405829717, 81.3738807063),
            (0.00000025582, 2.56904073164, 522.5774180938),
            (0.00000024351, 2.2028905975, 628.8515860501),
            (0.00000025479, 1.795218773, 143.6253063014),
            (0.00000024182, 5.67160913092, 443.8636662634),
            (0.00000025679, 5.43185950751, 546.956440482),
            (0.00000024177, 5.59982039849, 32.1951448046),
            (0.00000024428, 3.30271734903, 617.8058857862),
            (0.00000023535, 0.65842590604, 46.2097904851),
            (0.00000022371, 4.82094751058, 135.5485514541),
            (0.00000027179, 2.02720001624, 536.8045120954),
            (0.00000022213, 4.6166462422, 391.1734682239),
            (0.00000021973, 4.59216260632, 241.6102710893),
            (0.00000020813, 0.24392941148, 465.9550667912),
            (0.00000027264, 2.15210992383, 140.001969579),
            (0.00000021356, 5.27168432406, 159.1244246902),
            (0.00000023632, 4.94972840898, 561.1835344836),
            (0.00000024921, 0.54550733267, 181.7583419392),
            (0.00000023027, 3.80632203913, 55.1378785943),
            (0.00000019799, 1.30259938601, 518.6452648307),
            (0.00000019252, 1.31448491434, 543.0242872189),
            (0.00000019704, 4.90869636976, 909.8187330546),
            (0.00000020801, 0.91178207093, 76.4785195967),
            (0.00000019876, 0.66494008343, 66.70484372),
            (0.00000018957, 4.67998817036, 98.8999885246),
            (0.00000025913, 4.52903186569, 454.9093665273),
            (0.00000021888, 1.2337293174, 41.1019810544),
            (0.00000018703, 6.09640927844, 103.0927742186),
            (0.00000018207, 0.97283864525, 55.6591434561),
            (0.00000021247, 4.19373732137, 329.7251917809),
            (0.00000019408, 4.314682308, 6.2197751235),
            (0.00000018497, 5.78624335074, 142.4496501338),
            (0.00000022588, 5.84591645052, 297.6419215609),
            (0.0000001677, 6.09084656811, 211.8146227297),
            (0.00000016432, 2.5000846902, 61.2882177486),
            (0.00000020361, 3.16137245375, 186.2117600641),
            (0.00000015955, 2.98317221345, 81.8951455681),
            (0.00000018953, 6.01226591746, 155.7829722581),
            (0.00000017686, 4.82613965176, 273.1028404783),
            (0.00000015141, 3.65588411561, 472.1748419147),
            (0.0000001844, 3.47582817224, 36.6485629295),
            (0.00000016303, 0.13086415177, 554.0699874828),
            (0.00000018633, 0.23932740251, 23.5758732361),
            (0.00000014352, 2.69389896537, 70.1157321213),
            (0.0000001519, 2.43789398875, 486.4019359163),
            (0.00000014002, 5.12389205028, 29.2049475286),
            (0.00000015758, 4.24947053051, 146.3818033969),
            (0.00000014125, 1.55719788547, 110.2063212194),
            (0.00000017477, 1.94549668506, 835.0371344873),
            (0.00000013691, 1.63831110442, 92.0470739547),
            (0.00000013801, 0.13721153975, 235.3904959658),
            (0.00000013573, 2.85427895075, 49.5088043018),
            (0.00000012563, 3.20921738646, 100.3844612329),
            (0.0000001239, 2.88595800082, 60.5545045657),
            (0.00000014986, 0.32593957273, 259.5088859231),
            (0.00000012922, 2.77565630582, 105.4922706636),
            (0.00000012323, 3.36427641421, 440.6822725257),
            (0.00000015233, 0.2558984518, 258.8757464767),
            (0.00000012106, 0.10857558014, 157.6399519819),
            (0.00000012883, 0.30655541587, 124.2904028691),
            (0.000000109, 3.42905554547, 33.1371007917),
            (0.00000011206, 4.98840478043, 604.4725636619),
            (0.00000010812, 3.86253020441, 767.3690829208),
            (0.00000011561, 2.60450144944, 166.828672522),
            (0.000000102, 5.27810824796, 264.5048207692),
            (0.00000010926, 0.64149188846, 558.0021407459),
            (0.00000012315, 4.33998516461, 16.6747745564),
            (0.00000012641, 4.83194943583, 114.3991069134),
            (0.00000010479, 0.20404797652, 275.5505210331),
            (0.00000011291, 0.96120625051, 373.9079928365),
            (0.00000012144, 1.91712815063, 378.6432952517),
            (0.00000012229, 0.7046545467, 218.4069048687),
            (0.00000010753, 5.74480767273, 88.1149206916),
            (0.00000011006, 2.62953946665, 154.0166152595),
            (0.00000010429, 2.33056994007, 132.8884225782),
            (0.00000010465, 0.36943456465, 699.7010313543),
            (0.00000010076, 3.56540311122, 278.5194664497),
            (0.00000010029, 0.81917102953, 339.2864193365),
            (0.00000010084, 2.58619215129, 50.4025761791),
        ),
        # R2
        (
            (0.00022439904, 0.6995311876, 74.7815985673),
            (0.00004727037, 1.69901641488, 63.7358983034),
            (0.00001681903, 4.64833551727, 70.8494453042),
            (0.00001433755, 3.52119917947, 149.5631971346),
            (0.00001649559, 3.0966007898, 11.0457002639),
            (0.00000770188, 0.0, 0.0),
            (0.00000461009, 0.76676632849, 3.9321532631),
            (0.00000500429, 6.17229032223, 76.2660712756),
            (0.00000390371, 4.49605283502, 56.6223513026),
            (0.00000389945, 5.52673426377, 85.8272988312),
            (0.00000292097, 0.20389012095, 52.6901980395),
            (0.00000272898, 3.84707823651, 138.5174968707),
            (0.00000286579, 3.5335768327, 73.297125859),
            (0.00000205449, 3.24758017121, 78.7137518304),
            (0.00000219674, 1.96418942891, 131.4039498699),
            (0.00000215788, 0.84812474187, 77.962992305),
            (0.00000128834, 2.08146849515, 3.1813937377),
            (0.00000148554, 4.89840863841, 127.4717966068),
            (0.00000117452, 4.93414907433, 447.7958195265),
            (0.0000011269, 1.01361852218, 462.0229135281),
            (0.00000098875, 6.15817742611, 224.3447957019),
            (0.00000091379, 0.67973399531, 18.1592472647),
            (0.00000089217, 0.23425778826, 202.2533951741),
            (0.00000088206, 2.93094837724, 62.2514255951),
            (0.00000114066, 4.7874187396, 145.6310438715),
            (0.00000103858, 3.58561789629, 71.6002048296),
            (0.00000061819, 3.29964272893, 351.8165923087),
            (0.00000057782, 4.90737420887, 22.0914005278),
            (0.00000064369, 3.39006689398, 1.4844727083),
            (0.0000007111, 6.10490061068, 454.9093665273),
            (0.0000005099, 3.86691997779, 65.2203710117),
            (0.00000063537, 3.96202309168, 67.6680515665),
            (0.00000058957, 5.55530463687, 9.5612275556),
            (0.000000487, 3.74709235789, 269.9214467406),
            (0.00000043584, 1.92568752002, 59.8037450403),
            (0.0000004217, 2.61650997054, 151.0476698429),
            (0.0000004242, 6.13634453301, 284.1485407422),
            (0.0000004434, 5.89997845114, 71.8126531507),
            (0.00000037328, 5.91300114911, 984.6003316219),
            (0.00000036201, 5.40315761474, 77.7505439839),
            (0.00000041989, 2.09071623849, 12.5301729722),
            (0.00000031411, 4.59200004835, 148.0787244263),
            (0.00000031289, 2.26696307388, 195.1398481733),
            (0.0000002715, 3.53242984046, 209.3669421749),
            (0.00000028152, 4.57845964163, 77.2292791221),
            (0.00000026097, 0.65978256272, 120.358249606),
            (0.00000024372, 5.86680440531, 69.3649725959),
            (0.00000023037, 1.03776963677, 84.3428261229),
            (0.00000022679, 1.7143424397, 160.6088973985),
            (0.0000002765, 4.91488946525, 277.0349937414),
            (0.00000020816, 2.19643268155, 45.5766510387),
            (0.00000019961, 2.3207735618, 2.4476805548),
            (0.00000016584, 4.77529536873, 213.299095438),
            (0.00000016578, 1.85615182154, 340.7708920448),
            (0.00000017196, 4.36852462522, 54.1746707478),
            (0.00000016053, 3.64619586667, 152.7445908723),
            (0.00000014806, 5.43824503068, 408.4389436113),
            (0.00000013872, 3.38531100784, 358.9301393095),
            (0.00000013328, 5.25179190495, 137.0330241624),
            (0.00000013286, 1.26285812368, 134.5853436076),
            (0.0000001289, 3.03270380745, 92.940845832),
            (0.00000012467, 1.33213558369, 51.2057253312),
            (0.0000001345, 1.53176996919, 422.6660376129),
            (0.00000016442, 0.40190549188, 265.9892934775),
            (0.00000011996, 5.10426418352, 191.2076949102),
            (0.00000012898, 4.43242192513, 87.3117715395),
            (0.00000011449, 2.02645622099, 7.1135470008),
            (0.00000011826, 4.65645290272, 41.6444977756),
            (0.00000012045, 3.23910807852, 116.4260963429),
            (0.0000001168, 3.73278249629, 220.4126424388),
            (0.00000011573, 4.16500659139, 60.5545045657),
            (0.00000010175, 0.32936886913, 70.3281804424),
            (0.00000011332, 1.07613885149, 72.3339180125),
            (0.00000010284, 1.1860258206, 344.7030453079),
        ),
        # R3
        (
            (0.00001164382, 4.73453291602, 74.7815985673),
            (0.00000212367, 3.34255734999, 63.7358983034),
            (0.00000196408, 2.98004616318, 70.8494453042),
            (0.00000104527, 0.95807937648, 11.0457002639),
            (0.00000071681, 0.02528455665, 56.6223513026),
            (0.0000007254, 0.99701907912, 149.5631971346),
            (0.00000054875, 2.59436811267, 3.9321532631),
            (0.00000034029, 3.81553325635, 76.2660712756),
            (0.00000032081, 3.5982517784, 131.4039498699),
            (0.00000029641, 3.44111535957, 85.8272988312),
            (0.00000036377, 5.65035573017, 77.962992305),
            (0.00000027663, 0.4283600147, 3.1813937377),
            (0.00000027464, 2.55126467481, 52.6901980395),
            (0.00000024569, 5.14034173566, 78.7137518304),
            (0.0000001939, 5.13477648625, 18.1592472647),
            (0.00000015767, 0.37116951743, 447.7958195265),
            (0.00000015441, 5.57271837433, 462.0229135281),
            (0.00000015232, 3.85998573509, 73.297125859),
            (0.00000015475, 2.97496547327, 145.6310438715),
            (0.00000017951, 0.0, 0.0),
            (0.00000015958, 5.19915553904, 71.6002048296),
            (0.00000011056, 6.03152659562, 138.5174968707),
            (0.00000010529, 3.58261852497, 224.3447957019),
        ),
        # R4
        (
            (0.00000052996, 3.00838033088, 74.7815985673),
        ),
    ),
}


NEPTUNE = {
    'L': (
        # L0
        (
            (5.31188633047, 0.0, 0.0),
            (0.01798475509, 2.9010127305, 38.1330356378),
            (0.01019727662, 0.4858092366, 1.4844727083),
            (0.00124531845, 4.83008090682, 36.6485629295),
            (0.0004206445, 5.41054991607, 2.9689454166),
            (0.00037714589, 6.09221834946, 35.1640902212),
            (0.00033784734, 1.24488865578, 76.2660712756),
            (0.00016482741, 0.00007729261, 491.5579294568),
            (0.00009198582, 4.93747059924, 39.6175083461),
            (0.00008994249, 0.27462142569, 175.1660598002),
            (0.00004216235, 1.98711914364, 73.297125859),
            (0.00003364818, 1.03590121818, 33.6796175129),
            (0.000022848, 4.20606932559, 4.4534181249),
            (0.00001433512, 2.78340432711, 74.7815985673),
            (0.0000090024, 2.07606702418, 109.9456887885),
            (0.00000744996, 3.19032530145, 71.8126531507),
            (0.00000506206, 5.74785370252, 114.3991069134),
            (0.00000399552, 0.34972342569, 1021.2488945514),
            (0.00000345195, 3.46186210169, 41.1019810544),
            (0.00000306338, 0.49684039897, 0.5212648618),
            (0.00000287322, 4.50523446022, 0.0481841098),
            (0.00000323004, 2.24815188609, 32.1951448046),
            (0.00000340323, 3.30369900416, 77.7505439839),
            (0.00000266605, 4.88932609483, 0.9632078465),
            (0.00000227079, 1.79713054538, 453.424893819),
            (0.00000244722, 1.24693337933, 9.5612275556),
            (0.00000232887, 2.50459795017, 137.0330241624),
            (0.0000028217, 2.24565579693, 146.594251718),
            (0.00000251941, 5.78166597292, 388.4651552382),
            (0.0000015018, 2.99706110414, 5.9378908332),
            (0.00000170404, 3.3239063065, 108.4612160802),
            (0.00000151401, 2.1915309428, 33.9402499438),
            (0.00000148295, 0.85948986145, 111.4301614968),
            (0.00000118672, 3.67706204305, 2.4476805548),
            (0.00000101821, 5.70539236951, 0.1118745846),
            (0.00000097873, 2.80518260528, 8.0767548473),
            (0.00000103054, 4.40441222, 70.3281804424),
            (0.00000103305, 0.04078966679, 0.2606324309),
            (0.000001093, 2.41599378049, 183.2428146475),
            (0.00000073938, 1.32805041516, 529.6909650946),
            (0.00000077725, 4.16446516424, 4.192785694),
            (0.00000086379, 4.22834506045, 490.0734567485),
            (0.00000081536, 5.19908046216, 493.0424021651),
            (0.00000071503, 5.29530386579, 350.3321196004),
            (0.00000064418, 3.5454101605, 168.0525127994),
            (0.0000006257, 0.15028731465, 182.279606801),
            (0.00000058488, 3.50106873945, 145.1097790097),
            (0.00000048276, 1.11259925628, 112.9146342051),
            (0.00000047229, 4.57373229818, 46.2097904851),
            (0.00000039124, 1.6656935605, 213.299095438),
            (0.00000047728, 0.12906212461, 484.444382456),
            (0.00000046858, 3.01699530327, 498.6714764576),
            (0.00000038659, 2.38685706479, 2.9207613068),
            (0.00000047046, 4.498446604, 173.6815870919),
            (0.00000047565, 2.58404814824, 219.891377577),
            (0.00000044714, 5.47302733614, 176.6505325085),
            (0.00000032279, 3.4575915122, 30.7106720963),
            (0.00000028249, 4.13282446716, 6.592282139),
            (0.00000024433, 4.55736848232, 106.9767433719),
            (0.00000024661, 3.67822620786, 181.7583419392),
            (0.00000024505, 1.55095867965, 7.1135470008),
            (0.00000021848, 1.04366818343, 39.0962434843),
            (0.00000016936, 6.10896452834, 44.7253177768),
            (0.00000022169, 2.74932970271, 256.5399405065),
            (0.00000016614, 4.98188930613, 37.611770776),
            (0.00000017728, 3.55049134167, 1.3725981237),
            (0.00000017347, 2.1406923488, 42.5864537627),
            (0.00000014953, 3.36405649131, 98.8999885246),
            (0.00000014566, 0.69857991985, 1550.939859646),
            (0.00000015676, 6.22010212025, 454.9093665273),
            (0.00000013243, 5.61712542227, 68.8437077341),
            (0.00000014837, 3.52557245517, 25.6028626656),
            (0.00000012757, 0.04509743861, 11.0457002639),
            (0.00000011988, 4.81687553351, 24.1183899573),
            (0.0000001106, 1.78958277553, 7.4223635415),
            (0.00000012108, 1.87022663714, 79.2350166922),
            (0.00000011698, 0.49005698002, 1.5963472929),
            (0.00000010459, 2.38743199893, 381.3516082374),
            (0.00000011681, 3.85151357766, 218.4069048687),
            (0.00000011343, 0.81432278263, 525.4981794006),
            (0.00000010097, 5.03383557061, 601.7642506762),
            (0.00000010803, 2.92081211459, 293.188503436),
            (0.00000010183, 1.15395455831, 6244.9428143536),
        ),
        # L1
        (
            (38.37687716731, 0.0, 0.0),
            (0.00016604187, 4.86319129565, 1.4844727083),
            (0.00015807148, 2.27923488532, 38.1330356378),
            (0.00003334701, 3.6819967602, 76.2660712756),
            (0.0000130584, 3.67320813491, 2.9689454166),
            (0.00000604832, 1.50477747549, 35.1640902212),
            (0.00000178623, 3.45318524147, 39.6175083461),
            (0.00000106537, 2.45126138334, 4.4534181249),
            (0.00000105747, 2.7547932655, 33.6796175129),
            (0.00000072684, 5.48724732699, 36.6485629295),
            (0.00000057069, 5.2164980497, 0.5212648618),
            (0.00000057355, 1.85767603384, 114.3991069134),
            (0.00000035368, 4.51676827545, 74.7815985673),
            (0.00000032216, 5.9041148968, 77.7505439839),
            (0.00000029871, 3.67043294114, 388.4651552382),
            (0.00000028866, 5.16877529164, 9.5612275556),
            (0.00000028742, 5.16732589024, 2.4476805548),
            (0.00000025507, 5.24526281928, 168.0525127994),
            (0.00000024869, 4.7319306781, 182.279606801),
            (0.00000020205, 5.78945415677, 1021.2488945514),
            (0.00000019022, 1.82981144269, 484.444382456),
            (0.00000018661, 1.31606255521, 498.6714764576),
            (0.00000015063, 4.9500389376, 137.0330241624),
            (0.00000015094, 3.9870525494, 32.1951448046),
            (0.0000001072, 2.44148149225, 4.192785694),
            (0.00000011725, 4.89255650674, 71.8126531507),
        ),
        # L2
        (
            (0.00053892649, 0.0, 0.0),
            (0.00000281251, 1.19084538887, 38.1330356378),
            (0.00000295693, 1.85520292248, 1.4844727083),
            (0.0000027019, 5.72143228148, 76.2660712756),
            (0.00000023023, 1.21035596452, 2.9689454166),
        ),
        # L3
        (
            (0.00000031254, 0.0, 0.0),
            (0.00000012461, 6.04431418812, 1.4844727083),
            (0.00000014541, 1.35337075856, 76.2660712756),
            (0.00000011547, 6.11257808366, 38.1330356378),
        ),
    ),
    'B': (
        # B0
        (
            (0.03088622933, 1.44104372626, 38.1330356378),
            (0.00027780087, 5.91271882843, 76.2660712756),
            (0.00027623609, 0.0, 0.0),
            (0.0001535549, 2.52123799481, 36.6485629295),
            (0.00015448133, 3.50877080888, 39.6175083461),
            (0.00001999919, 1.50998669505, 74.7815985673),
            (0.0000196754, 4.37778195768, 1.4844727083),
            (0.00001015137, 3.21561035875, 35.1640902212),
            (0.00000605767, 2.80246601405, 73.297125859),
            (0.00000594878, 2.12892708114, 41.1019810544),
            (0.00000588805, 3.18655882497, 2.9689454166),
            (0.0000040183, 4.16883287237, 114.3991069134),
            (0.00000254333, 3.27120499438, 453.424893819),
            (0.00000261647, 3.76722704749, 213.299095438),
            (0.00000279964, 1.68165309699, 77.7505439839),
            (0.0000020559, 4.25652348864, 529.6909650946),
            (0.00000140455, 3.52969556376, 137.0330241624),
            (0.0000009853, 4.16774829927, 33.6796175129),
            (0.00000051257, 1.95121181203, 4.4534181249),
            (0.00000067971, 4.66970781659, 71.8126531507),
            (0.00000041931, 5.41783694467, 111.4301614968),
            (0.00000041822, 5.94832001477, 112.9146342051),
            (0.00000030637, 0.93620571932, 42.5864537627),
            (0.00000011084, 5.88898793049, 108.4612160802),
        ),
        # B1
        (
            (0.00227279214, 3.8079308987, 38.1330356378),
            (0.0000180312, 1.97576485377, 76.2660712756),
            (0.00001385733, 4.82555548018, 36.6485629295),
            (0.000014333, 3.14159265359, 0.0),
            (0.00001073298, 6.08054240712, 39.6175083461),
            (0.00000147903, 3.85766231348, 74.7815985673),
            (0.00000136448, 0.47764957338, 1.4844727083),
            (0.00000070285, 6.18782052139, 35.1640902212),
            (0.00000051899, 5.05221791891, 73.297125859),
            (0.00000037273, 4.89476629246, 41.1019810544),
            (0.00000042568, 0.30721737205, 114.3991069134),
            (0.00000037104, 5.75999349109, 2.9689454166),
            (0.00000026399, 5.21566335936, 213.299095438),
            (0.00000016949, 4.26463671859, 77.7505439839),
            (0.00000018747, 0.90426522185, 453.424893819),
            (0.00000012951, 6.17709713139, 529.6909650946),
            (0.00000010502, 1.20336443465, 137.0330241624),
        ),
        # B2
        (
            (0.00009690766, 5.57123750291, 38.1330356378),
            (0.00000078815, 3.62705474219, 76.2660712756),
            (0.00000071523, 0.4547668858, 36.6485629295),
            (0.00000058646, 3.14159265359, 0.0),
            (0.00000029915, 1.60671721861, 39.6175083461),
        ),
        # B3
        (
            (0.00000273423, 1.01688979072, 38.1330356378),
        ),
    ),
    'R': (
        # R0
        (
            (30.07013206102, 0.0, 0.0),
            (0.2706225949, 1.3299945893, 38.1330356378),
            (0.01691764281, 3.25186138896, 36.6485629295),
            (0.00807830737, 5.18592836167, 1.4844727083),
            (0.00537760613, 4.52113902845, 35.1640902212),
            (0.00495725642, 1.57105654815, 491.5579294568),
            (0.0027457197, 1.84552256801, 175.1660598002),
            (0.00135134095, 3.37220607384, 39.6175083461),
            (0.00121801825, 5.79754444303, 76.2660712756),
            (0.00100895397, 0.37702748681, 73.297125859),
            (0.00069791722, 3.79617226928, 2.9689454166),
            (0.00046687838, 5.74937810094, 33.6796175129),
            (0.00024593778, 0.50801728204, 109.9456887885),
            (0.00016939242, 1.59422166991, 71.8126531507),
            (0.00014229686, 1.07786112902, 74.7815985673),
            (0.00012011825, 1.92062131635, 1021.2488945514),
            (0.00008394731, 0.67816895547, 146.594251718),
            (0.000075718, 1.07149263431, 388.4651552382),
            (0.00005720852, 2.59059512267, 4.4534181249),
            (0.00004839672, 1.9068599107, 41.1019810544),
            (0.00004483492, 2.90573457534, 529.6909650946),
            (0.00004270202, 3.41343865825, 453.424893819),
            (0.0000435379, 0.6798566237, 32.1951448046),
            (0.00004420804, 1.74993796503, 108.4612160802),
            (0.00002881063, 1.98600105123, 137.0330241624),
            (0.00002635535, 3.09755943422, 213.299095438),
            (0.0000338093, 0.84810683275, 183.2428146475),
            (0.00002878942, 3.67415901855, 350.3321196004),
            (0.00002306293, 2.80962935724, 70.3281804424),
            (0.00002530149, 5.79839567009, 490.0734567485),
            (0.00002523132, 0.48630800015, 493.0424021651),
            (0.00002087303, 0.61858378281, 33.9402499438),
            (0.00001976522, 5.1170304456, 168.0525127994),
            (0.00001905254, 1.72186472126, 182.279606801),
            (0.00001654039, 1.92782545887, 145.1097790097),
            (0.00001435072, 1.70005157785, 484.444382456),
            (0.00001403029, 4.58914203187, 498.6714764576),
            (0.00001499193, 1.01623299513, 219.891377577),
            (0.0000139886, 0.7622031762, 176.6505325085),
            (0.00001403377, 6.07659416908, 173.6815870919),
            (0.0000112856, 5.96661179805, 9.5612275556),
            (0.00001228304, 1.59881465324, 77.7505439839),
            (0.00000835414, 3.97066884218, 114.3991069134),
            (0.00000811186, 3.0025888087, 46.2097904851),
            (0.00000731925, 2.10447054189, 181.7583419392),
            (0.00000615781, 2.97874625677, 106.9767433719),
            (0.00000704778, 1.1873821088, 256.5399405065),
            (0.0000050204, 1.38657803368, 5.9378908332),
            (0.00000530357, 4.24059166485, 111.4301614968),
            (0.00000437096, 2.27029212923, 1550.939859646),
            (0.0000040025, 1.25609325435, 8.0767548473),
            (0.00000421011, 1.89084929506, 30.7106720963),
            (0.00000382457, 3.29965259685, 983.1158589136),
            (0.00000422485, 5.53186169605, 525.4981794006),
            (0.00000355389, 2.27847846648, 218.4069048687),
            (0.00000280062, 1.54129714238, 98.8999885246),
            (0.00000314499, 3.95932948594, 381.3516082374),
            (0.00000280556, 4.54238271682, 44.7253177768),
            (0.00000267738, 5.13323364247, 112.9146342051),
            (0.00000333311, 5.75067616021, 39.0962434843),
            (0.00000291625, 4.02398326341, 68.8437077341),
            (0.00000321429, 1.50625025822, 454.9093665273),
            (0.00000309196, 2.85452752153, 72.0732855816),
            (0.00000345094, 1.35905860594, 293.188503436),
            (0.00000307439, 0.31964571332, 601.7642506762),
            (0.00000251356, 3.53992782846, 312.1990839626),
            (0.00000248152, 3.41078346726, 37.611770776),
            (0.00000306, 2.72475094464, 6244.9428143536),
            (0.00000293532, 4.89079857814, 528.2064923863),
            (0.00000234479, 0.59231043427, 42.5864537627),
            (0.00000239628, 3.16441455173, 143.6253063014),
            (0.00000214523, 3.6248028304, 278.2588340188),
            (0.00000246198, 1.01506302015, 141.2258098564),
            (0.00000174089, 5.55011789988, 567.8240007324),
            (0.00000163934, 2.10166491786, 2.4476805548),
            (0.00000162897, 2.48946521653, 4.192785694),
            (0.00000193455, 1.5842528758, 138.5174968707),
            (0.00000155323, 3.28425127954, 31.019488637),
            (0.00000182469, 2.45244890571, 255.0554677982),
            (0.00000177846, 4.14773474853, 10175.1525105732),
            (0.00000174413, 1.53042999914, 329.8370663655),
            (0.00000137649, 3.34900537767, 0.9632078465),
            (0.00000161011, 5.16655038482, 211.8146227297),
            (0.00000113473, 4.96286007991, 148.0787244263),
            (0.00000128823, 3.25521535448, 24.1183899573),
            (0.00000107363, 3.26457701792, 1059.3819301892),
            (0.00000122732, 5.39399536941, 62.2514255951),
            (0.00000120529, 3.08050145518, 184.7272873558),
            (0.00000099356, 1.92888554099, 28.5718080822),
            (0.00000097713, 2.59474415429, 6.592282139),
            (0.00000124095, 3.1151675034, 221.3758502853),
            (0.00000124693, 2.97042405451, 251.4321310758),
            (0.00000114252, 0.25039919123, 594.6507036754),
            (0.00000111006, 3.34276426767, 180.2738692309),
            (0.00000120939, 1.92914010593, 25.6028626656),
            (0.00000104667, 0.94883561775, 395.578702239),
            (0.00000109779, 5.43147520571, 494.5268748734),
            (0.00000096919, 0.86184760695, 1014.1353475506),
            (0.00000098685, 0.8957795271, 488.5889840402),
            (0.00000088968, 4.78109764779, 144.1465711632),
            (0.00000107888, 0.98700578434, 1124.34166877),
            (0.00000097067, 2.62667400276, 291.7040307277),
            (0.00000075131, 5.88936524779, 43.2408450685),
            (0.00000093718, 6.09873565184, 526.722019678),
            (0.00000094822, 0.2066294394, 456.3938392356),
            (0.00000070036, 2.39683345663, 426.598190876),
            (0.00000077187, 4.2107675324, 105.4922706636),
            (0.00000089874, 3.25100749923, 258.0244132148),
            (0.00000069133, 4.93031154435, 1028.3624415522),
            (0.00000090657, 1.69466970587, 366.485629295),
            (0.00000074242, 3.14479101276, 82.8583534146),
            (0.00000057995, 0.86159785905, 60.7669528868),
            (0.00000078695, 1.0930757555, 700.6642392008),
            (0.0000005723, 0.81331949225, 2.9207613068),
            (0.00000063443, 4.39590123005, 149.5631971346),
            (0.00000055698, 3.89047249911, 47.6942631934),
            (0.0000005643, 5.15003563302, 0.5212648618),
            (0.00000056174, 5.42986960794, 911.042573332),
            (0.00000061746, 6.16453667559, 1019.7644218431),
            (0.00000070503, 0.08077330612, 40.5807161926),
            (0.00000074677, 4.8590449998, 186.2117600641),
            (0.00000061861, 4.78702599861, 11.0457002639),
            (0.00000061135, 0.83712253227, 1022.7333672597),
            (0.00000061268, 5.70228826765, 178.1350052168),
            (0.00000052887, 0.37458943972, 27.0873353739),
            (0.00000056722, 3.52318112447, 216.9224321604),
            (0.00000048819, 5.10789123481, 64.9597385808),
            (0.0000006329, 4.3942491003, 807.9497991134),
            (0.00000064062, 6.28297531806, 7.1135470008),
            (0.00000046356, 1.34735469284, 451.9404211107),
            (0.0000006054, 3.40316162416, 294.6729761443),
            (0.000000469, 0.17048203552, 7.4223635415),
            (0.00000056766, 0.45048868231, 140.001969579),
            (0.00000055887, 1.06815733757, 172.1971143836),
            (0.00000053761, 2.79644687008, 328.3525936572),
            (0.00000043828, 6.04655696644, 135.5485514541),
            (0.00000049549, 0.64106656292, 41.0537969446),
            (0.0000005396, 2.91774494436, 563.6312150384),
            (0.00000042961, 5.40175361431, 487.3651437628),
            (0.00000051508, 0.09105540708, 210.3301500214),
            (0.00000041889, 3.12343223889, 29.226199388),
            (0.00000047655, 3.90701760087, 63.7358983034),
            (0.00000041639, 6.26847783513, 32.7164096664),
            (0.00000041429, 4.45464156759, 37.1698277913),
            (0.00000040745, 0.16043648294, 79.2350166922),
            (0.00000048205, 1.8419837301, 403.1341922245),
            (0.00000036912, 0.44771386183, 30.0562807905),
            (0.00000047762, 0.88083849566, 3302.479391062),
            (0.00000039465, 3.50565484069, 357.4456666012),
            (0.00000042139, 0.63375113663, 343.2185725996),
            (0.00000041275, 1.36370496322, 31.2319369581),
            (0.00000042612, 3.55270845713, 38.6543004996),
            (0.00000038931, 5.2669175327, 415.2918581812),
            (0.00000038967, 5.25866056502, 386.9806825299),
            (0.00000033734, 5.24400184426, 67.3592350258),
            (0.00000040879, 3.55292279438, 331.3215390738),
            (0.00000038768, 1.12288359393, 38.1812197476),
            (0.000000375, 6.08687972441, 35.4247226521),
            (0.00000038831, 4.67876780698, 38.084851528),
            (0.00000038231, 6.26491054328, 389.9496279465),
            (0.00000029976, 4.45759985804, 22.633917249),
            (0.00000031356, 0.07746010366, 12.5301729722),
            (0.00000026341, 4.59559782754, 106.0135355254),
            (0.00000027465, 5.9954158789, 206.1855484372),
            (0.00000025152, 4.4986776032, 34.2008823747),
            (0.00000024122, 5.17089441917, 129.9194771616),
            (0.00000028997, 3.6492721021, 253.5709950899),
            (0.00000027173, 4.37944546475, 142.1408335931),
            (0.00000030634, 1.5934880656, 348.8476468921),
            (0.00000031464, 1.05065113524, 100.3844612329),
            (0.00000024056, 1.02801635413, 41.7563723602),
            (0.00000022632, 4.72511111292, 81.3738807063),
            (0.00000021942, 3.48416607882, 69.1525242748),
            (0.00000026333, 3.01556008632, 365.0011565867),
            (0.00000022355, 3.92220883921, 5.1078094307),
            (0.00000022498, 4.03487494425, 19.1224551112),
            (0.00000022885, 1.58977064672, 189.3931538018),
            (0.0000002652, 3.61427038042, 367.9701020033),
            (0.00000025496, 2.43810518614, 351.8165923087),
            (0.00000019111, 2.59694457001, 2080.6308247406),
            (0.0000001964, 6.15701741238, 35.212274331),
            (0.00000025688, 2.00512719767, 439.782755154),
            (0.00000021613, 3.32354204724, 119.5069163441),
            (0.00000025389, 4.74025836522, 1474.6737883704),
            (0.00000018107, 5.35129342595, 244.318584075),
            (0.00000023295, 5.93767742799, 316.3918696566),
            (0.00000022087, 4.81594755148, 84.3428261229),
            (0.00000016972, 3.0510514994, 220.4126424388),
            (0.00000020022, 4.99276451168, 179.0982130633),
            (0.0000002037, 1.86508317889, 171.2339065371),
            (0.00000019426, 2.04829970231, 5.4166259714),
            (0.00000022628, 0.27205783433, 666.723989257),
            (0.00000019072, 3.70882976684, 164.1203595363),
            (0.00000017969, 3.40425338171, 69.3649725959),
            (0.00000018716, 0.90215956591, 285.3723810196),
            (0.00000015889, 0.42011285882, 697.743477894),
            (0.00000014988, 3.08544843665, 704.8570248948),
            (0.00000014774, 3.36129613309, 274.0660483248),
            (0.00000015972, 1.82864185268, 477.3308354552),
            (0.00000013892, 2.94161501165, 38.3936680687),
            (0.00000013922, 2.85574364078, 37.8724032069),
            (0.00000015481, 4.94982954853, 101.8689339412),
            (0.00000017571, 5.82317632469, 35.685355083),
            (0.00000015856, 5.04973561582, 36.9091953604),
            (0.00000016414, 3.63049397028, 45.2465826386),
            (0.00000017158, 2.51251149482, 20.6069278195),
            (0.00000012941, 3.03041555329, 522.5774180938),
            (0.00000015752, 5.00292909214, 247.2393453818),
            (0.00000012679, 0.20331109568, 460.5384408198),
            (0.0000001626, 5.93480347217, 815.0633461142),
            (0.00000012903, 3.51141502996, 446.3113468182),
            (0.00000013891, 5.5106469767, 31.5407534988),
            (0.00000013668, 5.4557613532, 39.3568759152),
            (0.00000013418, 3.95805150079, 290.2195580194),
            (0.00000015368, 2.45783892707, 26.826702943),
            (0.00000014246, 3.18588280921, 401.6497195162),
            (0.00000012222, 4.94370170146, 14.0146456805),
            (0.00000015484, 3.79703715637, 404.6186649328),
            (0.00000013427, 3.79527836573, 151.0476698429),
            (0.0000001445, 4.93940408761, 120.9913890524),
            (0.00000014331, 4.71117327722, 738.7972748386),
            (0.00000011566, 5.91003539239, 536.8045120954),
            (0.00000015578, 2.91836788254, 875.830299001),
            (0.00000013124, 2.16056013419, 152.5321425512),
            (0.00000011744, 2.94770244071, 2.7083129857),
            (0.00000012793, 1.97868575679, 1.3725981237),
            (0.00000012969, 0.00535826017, 97.4155158163),
            (0.00000013891, 4.7643544182, 0.2606324309),
            (0.00000013729, 2.3230647385, 38.2449102224),
            (0.00000010714, 6.18129683877, 115.8835796217),
            (0.0000001161, 4.61712859898, 178.7893965226),
            (0.00000011257, 0.79300245838, 42.3258213318),
            (0.000000145, 5.44690193314, 44.070926471),
            (0.00000011534, 5.26580538005, 160.9389657986),
            (0.00000013355, 5.20849186729, 32.4557772355),
            (0.00000013658, 2.15687632802, 476.4313180835),
            (0.00000013782, 3.47865209163, 38.0211610532),
            (0.00000012714, 2.09462988855, 20.4950532349),
            (0.00000013257, 5.15138524813, 103.0927742186),
            (0.0000001034, 5.38977407079, 222.8603229936),
            (0.00000013357, 5.89635739027, 748.0978699633),
            (0.00000012632, 1.20306997433, 16.1535096946),
            (0.00000011437, 1.58444114292, 495.4900827199),
            (0.00000011424, 4.74142930795, 487.6257761937),
            (0.00000011506, 3.11649121817, 17.6379824029),
            (0.0000001016, 3.74441320429, 457.617679513),
            (0.00000011162, 1.92907800408, 564.8550553158),
        ),
        # R1
        (
            (0.00236338502, 0.70498011235, 38.1330356378),
            (0.00013220279, 3.32015499895, 1.4844727083),
            (0.00008621863, 6.2162895163, 35.1640902212),
            (0.0000270174, 1.88140666779, 39.6175083461),
            (0.0000215315, 5.16873840979, 76.2660712756),
            (0.00002154735, 2.09431198086, 2.9689454166),
            (0.00001463924, 1.18417031047, 33.6796175129),
            (0.00001603165, 0.0, 0.0),
            (0.00001135773, 3.91891199655, 36.6485629295),
            (0.0000089765, 5.24122933533, 388.4651552382),
            (0.00000789908, 0.5331548458, 168.0525127994),
            (0.0000076003, 0.02051033644, 182.279606801),
            (0.00000607183, 1.0770650035, 1021.2488945514),
            (0.00000571622, 3.40060785432, 484.444382456),
            (0.0000056079, 2.88685815667, 498.6714764576),
            (0.0000049019, 3.46830928696, 137.0330241624),
            (0.00000264093, 0.86220057976, 4.4534181249),
            (0.00000270526, 3.27355867939, 71.8126531507),
            (0.00000203524, 2.41820674409, 32.1951448046),
            (0.00000155438, 0.36537064534, 41.1019810544),
            (0.00000132766, 3.60157672619, 9.5612275556),
            (0.00000093626, 0.66670888163, 46.2097904851),
            (0.00000083317, 3.25992461673, 98.8999885246),
            (0.00000072205, 4.47717435693, 601.7642506762),
            (0.00000068983, 1.46326969479, 74.7815985673),
            (0.00000086953, 5.77228651853, 381.3516082374),
            (0.00000068717, 4.52563942435, 70.3281804424),
            (0.00000064724, 3.85477388838, 73.297125859),
            (0.00000068377, 3.39509945953, 108.4612160802),
            (0.00000053375, 5.43650770516, 395.578702239),
            (0.00000044453, 3.61409723545, 2.4476805548),
            (0.00000041243, 4.73866592865, 8.0767548473),
            (0.00000048331, 1.98568593981, 175.1660598002),
            (0.00000041744, 4.94257598763, 31.019488637),
            (0.00000044102, 1.41744904844, 1550.939859646),
            (0.0000004117, 1.41999374753, 490.0734567485),
            (0.00000041099, 4.86312637841, 493.0424021651),
            (0.00000036267, 5.30764043577, 312.1990839626),
            (0.00000036284, 0.38187812797, 77.7505439839),
            (0.00000040619, 2.27237172464, 529.6909650946),
            (0.0000003236, 5.91123007786, 5.9378908332),
            (0.00000031197, 2.70549944134, 1014.1353475506),
            (0.0000003273, 5.22147683115, 41.0537969446),
            (0.00000036079, 4.87817494829, 491.5579294568),
            (0.00000030181, 3.63273193845, 30.7106720963),
            (0.00000029991, 3.30769367603, 1028.3624415522),
            (0.00000027048, 1.77647060739, 44.7253177768),
            (0.00000027756, 4.55583165091, 7.1135470008),
            (0.00000027475, 0.97228280623, 33.9402499438),
            (0.00000024944, 3.10083391185, 144.1465711632),
            (0.00000025958, 2.99724758632, 60.7669528868),
            (0.00000021369, 4.71270048898, 278.2588340188),
            (0.00000021283, 0.68957829113, 251.4321310758),
            (0.00000023727, 5.12044184469, 176.6505325085),
            (0.00000021392, 0.86286397645, 4.192785694),
            (0.00000023373, 1.64955088447, 173.6815870919),
            (0.00000024163, 3.56602004577, 145.1097790097),
            (0.00000020238, 5.61479765982, 24.1183899573),
            (0.00000026958, 4.14294870704, 453.424893819),
            (0.00000024048, 1.00718363213, 213.299095438),
            (0.00000018322, 1.98028683488, 72.0732855816),
            (0.00000018266, 6.17260374467, 189.3931538018),
            (0.00000019201, 4.65162168927, 106.9767433719),
            (0.00000017606, 1.60307551767, 62.2514255951),
            (0.00000016545, 1.69931816587, 357.4456666012),
            (0.00000020132, 3.29520553529, 114.3991069134),
            (0.00000015425, 4.38812302799, 25.6028626656),
            (0.00000019173, 2.20014267311, 343.2185725996),
            (0.00000015077, 3.66802659382, 0.5212648618),
            (0.00000014029, 0.5533633329, 129.9194771616),
            (0.00000013361, 5.8575108372, 68.8437077341),
            (0.00000015357, 4.20731277007, 567.8240007324),
            (0.00000012746, 3.52815836608, 477.3308354552),
            (0.00000011724, 5.5764726346, 31.2319369581),
            (0.00000011533, 0.89138506506, 594.6507036754),
            (0.00000010508, 4.35552732772, 32.7164096664),
            (0.00000010826, 5.21826226871, 26.826702943),
            (0.00000010085, 1.98102855874, 40.5807161926),
            (0.00000010518, 5.27281360238, 2.9207613068),
            (0.00000010114, 4.51164596694, 28.5718080822),
            (0.00000010392, 5.18877536013, 42.5864537627),
        ),
        # R2
        (
            (0.00004247412, 5.89910679117, 38.1330356378),
            (0.0000021757, 0.3458182908, 1.4844727083),
            (0.00000163025, 2.2387294713, 168.0525127994),
            (0.00000156285, 4.59414467342, 182.279606801),
            (0.0000011794, 5.10295026024, 484.444382456),
            (0.00000112429, 1.19000583596, 498.6714764576),
            (0.00000127141, 2.84786298079, 35.1640902212),
            (0.00000099467, 3.41578558739, 175.1660598002),
            (0.00000064814, 3.4621406484, 388.4651552382),
            (0.00000077286, 0.01659281785, 491.5579294568),
            (0.00000049509, 4.06995509133, 76.2660712756),
            (0.0000003933, 6.09521855958, 1021.2488945514),
            (0.0000003645, 5.17130059988, 137.0330241624),
            (0.0000003708, 5.97288967681, 2.9689454166),
            (0.00000030484, 3.58259801313, 33.6796175129),
            (0.00000021099, 0.76843555176, 36.6485629295),
            (0.00000013886, 3.59248623971, 395.578702239),
            (0.00000013117, 5.09263515697, 98.8999885246),
            (0.00000011379, 1.18060018898, 381.3516082374),
        ),
        # R3
        (
            (0.00000166297, 4.55243893489, 38.1330356378),
            (0.0000002238, 3.94830879358, 168.0525127994),
            (0.00000021348, 2.86296778794, 182.279606801),
            (0.00000016233, 0.54226725872, 484.444382456),
            (0.00000015623, 5.75702251906, 498.6714764576),
            (0.00000011867, 4.4028019271, 1.4844727083),
        ),
        # R4
        (
            (0.00000004227, 2.40375758563, 477.3308354552),
        ),
    ),
}


# Least-squares fit to the mass-weighted barycentre of the planet tables
# above, rotated to the J2000 ecliptic, over 1500-2500 TDB.
SUN = {
    'X': (
        # X0
        (
            (0.0049543711, 3.74007710233, 529.6909650946),
            (0.00271895809, 4.01519138685, 213.2990954380),
            (0.00154730761, 2.17957638171, 38.1330356378),
            (0.00084847096, 2.31119946824, 74.7815985673),
            (0.00029416138, 0.00000000000, 0.0000000000),
            (0.00012012201, 4.09097382494, 1059.3819301892),
            (0.00007563292, 3.24231753500, 426.5981908760),
            (0.00001985421, 4.81266148716, 149.5631971346),
            (0.00001785565, 0.95193829799, 206.1855484372),
            (0.00001647452, 3.94070282239, 220.4126424388),
            (0.00001539106, 5.05645851902, 76.2660712756),
            (0.00001513706, 4.02392736892, 522.5774180938),
            (0.00001263227, 0.25573461777, 536.8045120954),
            (0.00000434213, 4.43822062218, 1589.0728952838),
            (0.00000307736, 2.50230957044, 639.8972863140),
            (0.00000261416, 6.16848286600, 419.4846438752),
            (0.00000234101, 4.88727522188, 110.2063212194),
            (0.0000023303, 5.31254887349, 103.0927742186),
            (0.00000209305, 5.77973211258, 316.3918696566),
            (0.00000131603, 2.33682704464, 632.7837393132),
            (0.00000104344, 3.10169033180, 1162.4747044078),
            (0.0000006606, 0.29540015616, 846.0828347512),
            (0.00000060709, 5.16350100392, 111.4301614968),
            (0.00000056213, 1.34626949031, 949.1756089698),
            (0.00000019212, 4.78451469272, 2118.7638603784),
            (0.00000018302, 3.25633428953, 138.5174968707),
            (0.00000017106, 4.74278869051, 628.3075849991),
            (0.00000016793, 5.29226696681, 742.9900605326),
            (0.00000015848, 5.53533800125, 63.7358983034),
            (0.0000001464, 1.80705249476, 853.1963817520),
            (0.00000008502, 5.57100902821, 175.1660598002),
            (0.00000007709, 3.37849851458, 323.5054166574),
            (0.00000007282, 3.35500462133, 1021.3285546211),
            (0.00000004978, 0.87230596419, 334.0612426700),
            (0.00000003865, 2.92348125514, 491.5579294568),
            (0.00000002142, 5.74353651080, 454.9093665273),
        ),
        # X1
        (
            (0.00002953678, 3.25461637318, 74.7815985673),
            (0.00001504872, 5.58203280788, 213.2990954380),
            (0.0000096935, 0.69561809011, 38.1330356378),
            (0.00000820224, 0.02937198969, 522.5774180938),
            (0.00000815241, 3.14159265359, 0.0000000000),
            (0.00000755261, 3.59697681737, 536.8045120954),
            (0.00000730017, 2.21617346755, 529.6909650946),
            (0.00000697363, 2.89878681919, 1059.3819301892),
            (0.00000604081, 0.91453046041, 426.5981908760),
        ),
        # X2
        (
            (0.00005638676, 4.85636495851, 529.6909650946),
            (0.00003526086, 4.41874410462, 74.7815985673),
            (0.00002563657, 5.79320690356, 213.2990954380),
            (0.00001565081, 5.97255997197, 38.1330356378),
            (0.00001366129, 3.14159265359, 0.0000000000),
        ),
    ),
    'Y': (
        # Y0
        (
            (0.00495271084, 2.16950816380, 529.6909650946),
            (0.00272312872, 2.44370315916, 213.2990954380),
            (0.00154697201, 0.60866327773, 38.1330356378),
            (0.00079614559, 0.83594000244, 74.7815985673),
            (0.00033720005, 0.00000000000, 0.0000000000),
            (0.00012011616, 2.52041214301, 1059.3819301892),
            (0.00008109827, 5.98584521492, 76.2660712756),
            (0.00007571234, 1.67017627598, 426.5981908760),
            (0.00001974461, 3.24304873063, 149.5631971346),
            (0.000018207, 5.65020985337, 206.1855484372),
            (0.00001620246, 2.35355046817, 220.4126424388),
            (0.00001564234, 2.46228180925, 522.5774180938),
            (0.00001262406, 5.00109243059, 536.8045120954),
            (0.00000435283, 2.86717930840, 1589.0728952838),
            (0.00000309032, 0.92572660558, 639.8972863140),
            (0.0000026316, 4.51001752550, 419.4846438752),
            (0.00000246992, 0.28666815089, 103.0927742186),
            (0.0000020867, 4.18443485003, 316.3918696566),
            (0.00000197829, 3.37749730009, 110.2063212194),
            (0.00000124314, 0.77484907654, 632.7837393132),
            (0.00000104706, 1.56061855539, 1162.4747044078),
            (0.000000907, 3.41429493992, 111.4301614968),
            (0.00000070332, 5.59628101784, 63.7358983034),
            (0.00000064689, 4.98567901282, 846.0828347512),
            (0.00000055971, 6.04357277693, 949.1756089698),
            (0.00000018466, 3.22262921491, 2118.7638603784),
            (0.00000017136, 0.22616313808, 853.1963817520),
            (0.00000016731, 3.72548520592, 742.9900605326),
            (0.00000015526, 1.41231505283, 138.5174968707),
            (0.0000001468, 3.14220962171, 628.3075849991),
            (0.00000009459, 5.27191706242, 175.1660598002),
            (0.00000008385, 1.19932235459, 323.5054166574),
            (0.00000007769, 2.01837092982, 1021.3285546211),
            (0.00000005354, 6.00392078958, 334.0612426700),
            (0.00000005157, 0.73423851448, 491.5579294568),
            (0.00000003891, 4.02001255592, 454.9093665273),
        ),
        # Y1
        (
            (0.00010597924, 4.42774074251, 74.7815985673),
            (0.00001546849, 4.04905068703, 213.2990954380),
            (0.00001064265, 5.28823312218, 38.1330356378),
            (0.00000982172, 4.67351853773, 522.5774180938),
            (0.0000070238, 1.33251273271, 1059.3819301892),
            (0.00000610293, 5.60350605229, 426.5981908760),
            (0.0000059675, 2.11971216984, 536.8045120954),
            (0.0000052485, 0.07822072704, 529.6909650946),
            (0.00000198571, 0.00000000000, 0.0000000000),
        ),
        # Y2
        (
            (0.00007486482, 6.12012514599, 74.7815985673),
            (0.00005648804, 3.22271292642, 529.6909650946),
            (0.00003471058, 0.00000000000, 0.0000000000),
            (0.00002403, 4.48389756264, 213.2990954380),
            (0.00002180652, 5.16770823357, 38.1330356378),
        ),
    ),
    'Z': (
        # Z0
        (
            (0.00011808748, 0.45985626086, 213.2990954380),
            (0.00011277621, 0.41422600049, 529.6909650946),
            (0.00004782624, 4.59197242202, 38.1330356378),
            (0.0000127423, 5.64890434649, 74.7815985673),
            (0.0000114706, 3.14159265359, 0.0000000000),
            (0.00000329078, 5.97961315112, 426.5981908760),
            (0.00000273256, 0.76652626794, 1059.3819301892),
            (0.0000019752, 1.96441678895, 76.2660712756),
            (0.00000084534, 3.63980958081, 206.1855484372),
            (0.00000076115, 0.39958402929, 220.4126424388),
            (0.00000041389, 0.84018246492, 522.5774180938),
            (0.00000033255, 2.99392586771, 536.8045120954),
            (0.00000027083, 1.94660072867, 149.5631971346),
            (0.00000013471, 5.24574468505, 639.8972863140),
            (0.0000001245, 1.66933979340, 110.2063212194),
            (0.00000010431, 2.26118128922, 316.3918696566),
            (0.00000009849, 1.10673582613, 1589.0728952838),
            (0.00000008102, 2.75322348045, 419.4846438752),
            (0.00000005338, 2.40219701243, 103.0927742186),
            (0.00000003047, 5.22897003564, 632.7837393132),
            (0.00000002933, 1.24275096511, 111.4301614968),
            (0.00000002607, 2.02809017665, 63.7358983034),
            (0.00000002443, 6.09934669432, 1162.4747044078),
            (0.00000001787, 3.18573188477, 846.0828347512),
            (0.00000001391, 4.36126306230, 949.1756089698),
            (0.00000000736, 0.40126814223, 323.5054166574),
            (0.00000000612, 4.52022344769, 853.1963817520),
            (0.00000000604, 1.76456630337, 742.9900605326),
            (0.00000000591, 1.19647104306, 138.5174968707),
            (0.00000000552, 1.30748072285, 628.3075849991),
            (0.00000000423, 1.45751908242, 2118.7638603784),
            (0.00000000375, 2.29319776998, 175.1660598002),
            (0.00000000196, 6.28273228489, 1021.3285546211),
            (0.00000000114, 4.14178693227, 334.0612426700),
            (0.00000000112, 2.24236232965, 454.9093665273),
            (0.00000000091, 5.93369010330, 491.5579294568),
        ),
        # Z1
        (
            (0.00000603502, 1.83337325548, 213.2990954380),
            (0.00000415315, 4.68691144806, 529.6909650946),
            (0.00000242156, 0.38389296961, 74.7815985673),
            (0.00000091575, 0.00000000000, 0.0000000000),
            (0.00000042169, 3.62710689505, 522.5774180938),
            (0.00000037499, 0.41958520661, 536.8045120954),
            (0.00000027437, 3.35624406223, 38.1330356378),
            (0.00000023904, 5.56320391890, 1059.3819301892),
            (0.00000014953, 3.06503303316, 426.5981908760),
        ),
        # Z2
        (
            (0.00000294295, 1.89157733563, 529.6909650946),
            (0.00000251263, 1.78992938050, 74.7815985673),
            (0.00000138942, 1.97698982068, 213.2990954380),
            (0.00000110493, 2.10389422843, 38.1330356378),
            (0.00000018705, 3.14159265359, 0.0000000000),
        ),
    ),
}
