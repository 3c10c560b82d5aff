"""Scheduler module for periodic notice crawling and purging.

Schedule overview (Asia/Seoul):
  - whole       - every 10 min 09-16 weekdays, every 30 min 17-23 weekdays,
                  every 30 min 09-23 weekends, purge at 00:00 weekdays
  - major, major_style, oceanography_style, library_style, inha_design_style
                - every 10 min 09-16 weekdays, purge at 17:00 weekdays
"""
