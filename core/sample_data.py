# WORKFLOW: Built-in sample packing list used for the initial dashboard load.
# Used by: Dataset holder (load_sample), API sample endpoint, tests

SAMPLE_CSV = """customer,DeviceName,DeviceCategory,LotNumber,deliverdate,licenseID,Numbers
Taipei General Hospital,Coronary Stent System,Cardiology,LT20240101,2024-01-05,MD-2023-0012,40
Taipei General Hospital,Infusion Pump,Infusion,LT20240102,2024-01-06,MD-2022-0871,12
Kaohsiung Medical Center,Coronary Stent System,Cardiology,LT20240103,2024-01-09,MD-2023-0012,25
Kaohsiung Medical Center,Orthopedic Bone Screw,Orthopedics,LT20240104,2024-01-10,MD-2021-0456,200
Taichung Veterans Clinic,Blood Glucose Meter,Diagnostics,LT20240105,2024-01-12,MD-2020-1130,60
Taichung Veterans Clinic,Infusion Pump,Infusion,LT20240106,2024-01-15,MD-2022-0871,8
Tainan City Hospital,Surgical Suture,Surgical,LT20240107,2024-01-18,MD-2019-0077,500
Tainan City Hospital,Coronary Stent System,Cardiology,LT20240108,2024-01-20,MD-2023-0012,15
Hsinchu Health Center,Blood Glucose Meter,Diagnostics,LT20240109,2024-01-22,MD-2020-1130,30
Hsinchu Health Center,Orthopedic Bone Screw,Orthopedics,LT20240110,2024-01-25,MD-2021-0456,120
"""
