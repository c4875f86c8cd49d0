"""
Simple example of using exifmeta-core to read an image's metadata
"""

import json
from pathlib import Path
from exifmeta_core import ExtractionOptions, extract_image_metadata


def main():
    # Replace with actual image path
    image_path = Path("example.jpg")
    
    if not image_path.exists():
        print(f"Error: {image_path} not found")
        print("Please provide a valid image path")
        return
    
    print(f"Reading {image_path}...")
    print("-" * 60)
    
    # Extract metadata (default: no raw EXIF, out-of-range GPS is dropped)
    options = ExtractionOptions()
    
    # Or keep the decoded tag groups and fail on invalid GPS:
    # options = ExtractionOptions(include_raw_exif=True, validate_gps=True)
    
    result = extract_image_metadata(image_path, options)
    
    if result.success:
        print("✓ Success!\n")
        
        metadata = result.data
        print(f"Filename:       {metadata.file_name}")
        print(f"Size:           {metadata.file_size} bytes")
        if metadata.image.width and metadata.image.height:
            print(f"Dimensions:     {metadata.image.width:g}x{metadata.image.height:g}px")
        
        if metadata.date_time.date_time_original:
            print(f"Taken at:       {metadata.date_time.date_time_original}")
        
        if metadata.camera_label:
            print(f"Camera:         {metadata.camera_label}")
        
        # GPS
        if metadata.has_gps:
            print(f"GPS:            {metadata.gps.latitude:.6f}, {metadata.gps.longitude:.6f}")
            if metadata.gps.altitude is not None:
                print(f"Altitude:       {metadata.gps.altitude:.1f}m")
        
        # Camera settings
        camera = metadata.camera
        if camera.iso:
            print(f"ISO:            {camera.iso:g}")
        if camera.aperture:
            print(f"Aperture:       f/{camera.aperture:g}")
        if camera.shutter_speed:
            print(f"Shutter:        {camera.shutter_speed}")
        if camera.focal_length:
            print(f"Focal length:   {camera.focal_length:g}mm")
        
        print("\nJSON:")
        print(json.dumps(metadata.to_dict(), indent=2))
        
    else:
        print(f"✗ Failed: {result.error.kind.value}: {result.error.message}")


if __name__ == "__main__":
    main()
